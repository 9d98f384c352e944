"""
.. The NTStatus API
"""

from __future__ import annotations

__all__ = ["NTStatus", "as_error", "name"]

from typing import Iterable, Optional, Union

from typing_extensions import NamedTuple, Self

from . import _utils
from ._utils import arg_type_error, arg_value_error_range
from .codes import aliases, codes
from .exceptions import StatusError

UNKNOWN = "UNKNOWN"


# To bypass `NamedTuple`'s `__new__()` override limitation
class _DummyNTStatus(NamedTuple):
    value: int


class NTStatus(_DummyNTStatus):
    """An NT status code.

    Args:
        value: The status code, as an unsigned 32-bit word.

    Raises:
        TypeError: *value* is not an integer.
        ValueError: *value* is not within the range of an unsigned 32-bit word.

    NOTE:
        Instances do not compare equal to plain integers i.e
        ``NTStatus(0x102) != 0x102``. Use :py:attr:`value` or :py:func:`int` to
        extract the word.

    TIP:
        This class is a :py:class:`~typing.NamedTuple` of one field, hence it's
        immutable and hashable.
    """

    __slots__ = ()

    value: int = _DummyNTStatus.value
    value.__doc__ = """The unsigned 32-bit word"""

    def __new__(cls, value: int) -> Self:
        # `bool` is an `int` subclass but never a meaningful status word
        if not isinstance(value, int) or isinstance(value, bool):
            raise arg_type_error("value", value)
        if value & ~0xFFFFFFFF:
            raise arg_value_error_range("value", value)

        # Using `tuple` directly instead of `super()` for performance
        return tuple.__new__(cls, (value,))

    def __int__(self) -> int:
        return self[0]

    def __str__(self) -> str:
        return self.name

    def _replace(self, **kwargs: int) -> Self:
        return type(self)(**{"value": self[0], **kwargs})

    @property
    def hex(self) -> str:
        """The code as a ``0x``-prefixed, zero-padded, uppercase hexadecimal string
        e.g ``0xC0000001``.
        """
        return "0x%08X" % self

    @property
    def is_success(self) -> bool:
        """``True`` if :py:meth:`as_error` returns ``None``, otherwise ``False``."""
        return self.as_error() is None

    @property
    def name(self) -> str:
        """The symbolic name of the code.

        Returns:
            The Microsoft-assigned name of the code, without the ``STATUS_`` prefix
            e.g ``TIMEOUT``, if the code is known. Otherwise, ``UNKNOWN``.
        """
        return codes.get(self[0], UNKNOWN)

    @property
    def signed(self) -> int:
        """The code as a signed 32-bit integer i.e the ``LONG`` form defined by
        [MS-DTYP].
        """
        value = self[0]
        return value - 0x100000000 if value & 0x80000000 else value

    def as_error(self) -> Optional[StatusError]:
        """Projects the code into an error value.

        Returns:
            * ``None``, if the code is ``SUCCESS``.
            * An error whose string form is :py:attr:`name`, if the code is known.
            * ``None``, if the code is unknown. See
              :py:func:`~nt_status.set_unknown_policy`.

        This never raises. The result is the error channel.
        """
        value = self[0]
        if not value:
            return None
        if value in codes or _utils._unknown_is_error:
            return StatusError(self)
        return None

    def raise_for_status(self) -> None:
        """Raises the error returned by :py:meth:`as_error`, if any.

        Raises:
            nt_status.exceptions.StatusError: The code indicates a non-success
              condition.
        """
        error = self.as_error()
        if error is not None:
            raise error

    @classmethod
    def from_signed(cls, value: int) -> Self:
        """Creates a new instance from the signed 32-bit (``LONG``) form of a code.

        Args:
            value: The signed status code.

        Returns:
            A new instance representing the same code.

        Raises:
            TypeError: *value* is not an integer.
            ValueError: *value* is not within the range of a signed 32-bit integer.
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise arg_type_error("value", value)
        if not -0x80000000 <= value <= 0x7FFFFFFF:
            raise arg_value_error_range("value", value)

        return tuple.__new__(cls, (value & 0xFFFFFFFF,))

    @classmethod
    def _make(cls, iterable: Iterable[int]) -> Self:
        return cls(*iterable)

    @classmethod
    def _new(cls, value: int) -> Self:
        """Alternate constructor for internal use only."""
        return tuple.__new__(cls, (value,))


def name(code: Union[NTStatus, int]) -> str:
    """Returns the symbolic name of a status code.

    Args:
        code: A status code or an unsigned 32-bit word.

    Raises:
        TypeError: *code* is of an inappropriate type.
        ValueError: *code* is an integer out of the range of a 32-bit word.

    See :py:attr:`NTStatus.name`.
    """
    return (code if isinstance(code, NTStatus) else NTStatus(code)).name


def as_error(code: Union[NTStatus, int]) -> Optional[StatusError]:
    """Projects a status code into an error value.

    Args:
        code: A status code or an unsigned 32-bit word.

    Raises:
        TypeError: *code* is of an inappropriate type.
        ValueError: *code* is an integer out of the range of a 32-bit word.

    See :py:meth:`NTStatus.as_error`.
    """
    return (code if isinstance(code, NTStatus) else NTStatus(code)).as_error()


_NTStatus = NTStatus._new

# Constants e.g `NT_STATUS_TIMEOUT`, for every name and alias in the table
_constants = {
    f"NT_STATUS_{symbol}": _NTStatus(code) for code, symbol in codes.items()
}
_constants.update(
    (f"NT_STATUS_{symbol}", _NTStatus(code)) for symbol, code in aliases.items()
)
globals().update(_constants)
__all__ += _constants
del _constants
