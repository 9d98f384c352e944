from contextlib import contextmanager

from nt_status import _utils


@contextmanager
def reset_unknown_policy():
    unknown_is_error = _utils._unknown_is_error
    try:
        yield
    finally:
        _utils._unknown_is_error = unknown_is_error
