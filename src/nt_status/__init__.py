"""
nt-status

Windows NT status codes (NTSTATUS), their symbolic names and error projection
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from . import _utils
from .exceptions import CatalogError, CatalogNotFoundError, NTStatusError, StatusError
from .status import *  # noqa: F401, F403
from .status import __all__ as _status_all

__all__ = (
    "UnknownPolicy",
    "get_unknown_policy",
    "set_unknown_policy",
    "NTStatusError",
    "StatusError",
    "CatalogError",
    "CatalogNotFoundError",
    *_status_all,
)

version_info = (0, 1, 0)

# Follows https://semver.org/spec/v2.0.0.html
__version__ = ".".join(map(str, version_info[:3]))
if version_info[3:]:
    __version__ += "-" + ".".join(map(str, version_info[3:]))


class UnknownPolicy(Enum):
    """Values for setting how codes absent from the name table are treated by
    :py:meth:`NTStatus.as_error() <nt_status.NTStatus.as_error>`.

    See :py:func:`set_unknown_policy`.
    """

    IGNORE = auto()
    """Unknown codes are not errors (the default)"""

    ERROR = auto()
    """Every unknown non-zero code is an error named ``UNKNOWN``"""


def get_unknown_policy() -> UnknownPolicy:
    """Returns the current unknown-code policy.

    See :py:func:`set_unknown_policy`.
    """
    return UnknownPolicy.ERROR if _utils._unknown_is_error else UnknownPolicy.IGNORE


def set_unknown_policy(policy: UnknownPolicy) -> None:
    """Sets how codes absent from the name table are treated.

    Args:
        policy: The new policy.

    Raises:
        TypeError: *policy* is not an :py:class:`UnknownPolicy` member.

    NOTE:
        This affects all subsequent calls to
        :py:meth:`NTStatus.as_error() <nt_status.NTStatus.as_error>` and the
        functions built upon it, in all threads. Names are never affected.
    """
    if not isinstance(policy, UnknownPolicy):
        raise _utils.arg_type_error("policy", policy)

    _utils._unknown_is_error = policy is UnknownPolicy.ERROR
    _logger.debug(f"Unknown-code policy set to {policy.name}")


_logger = logging.getLogger(__name__)
