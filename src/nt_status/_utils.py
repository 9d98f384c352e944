"""
.. Utilities
"""

from __future__ import annotations

from typing_extensions import Any

# Set from within `nt_status.set_unknown_policy()`
_unknown_is_error = False


def arg_type_error(arg: str, value: Any, got_extra: str = "") -> TypeError:
    return TypeError(
        f"Invalid type for {arg!r} (got: {type(value).__qualname__}; {got_extra})"
        if got_extra
        else f"Invalid type for {arg!r} (got: {type(value).__qualname__})"
    )


def arg_value_error_range(arg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(
        f"{arg!r} is out of range (got: {value!r}; {got_extra})"
        if got_extra
        else f"{arg!r} is out of range (got: {value!r})"
    )
