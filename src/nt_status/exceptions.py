"""
.. Custom Exceptions
"""

from __future__ import annotations

from typing_extensions import TYPE_CHECKING

if TYPE_CHECKING:
    from .status import NTStatus


class NTStatusError(Exception):
    """Exception baseclass. Raised for generic errors."""


class StatusError(NTStatusError):
    """An NT status code indicating a non-success condition.

    Args:
        status: The offending status code.

    The string form of the error is exactly the symbolic name of the code
    e.g ``TIMEOUT``.

    NOTE:
        Instances are returned by :py:meth:`~nt_status.NTStatus.as_error`, not
        raised, unless the caller chooses to.
    """

    def __init__(self, status: NTStatus) -> None:
        super().__init__(status.name)
        self.status = status

    def __reduce__(self):
        return type(self), (self.status,)


class CatalogError(NTStatusError):
    """Raised for errors pertaining to obtaining or parsing an NTSTATUS catalog."""


class CatalogNotFoundError(CatalogError, FileNotFoundError):
    """Raised for 404 errors."""
