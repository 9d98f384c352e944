import pytest

import nt_status
from nt_status import (
    NT_STATUS_SUCCESS,
    NT_STATUS_TIMEOUT,
    NTStatus,
    StatusError,
    UnknownPolicy,
    as_error,
    get_unknown_policy,
    set_unknown_policy,
)

from . import reset_unknown_policy


class TestUnknownPolicy:
    @reset_unknown_policy()
    def test_default(self):
        assert get_unknown_policy() is UnknownPolicy.IGNORE

    @pytest.mark.parametrize("policy", UnknownPolicy)
    @reset_unknown_policy()
    def test_set_get(self, policy):
        set_unknown_policy(policy)
        assert get_unknown_policy() is policy

    @pytest.mark.parametrize("policy", [None, "ERROR", 1, True])
    @reset_unknown_policy()
    def test_invalid(self, policy):
        with pytest.raises(TypeError, match="'policy'"):
            set_unknown_policy(policy)
        assert get_unknown_policy() is UnknownPolicy.IGNORE

    @reset_unknown_policy()
    def test_ignore(self):
        set_unknown_policy(UnknownPolicy.IGNORE)
        assert NTStatus(0xFFFFFFFF).as_error() is None
        assert NTStatus(0xFFFFFFFF).is_success

    @pytest.mark.parametrize("value", [0xFFFFFFFF, 0xDEADBEEF, 0x0000FFFF])
    @reset_unknown_policy()
    def test_error(self, value):
        set_unknown_policy(UnknownPolicy.ERROR)
        error = NTStatus(value).as_error()
        assert isinstance(error, StatusError)
        assert str(error) == "UNKNOWN"
        assert error.status == NTStatus(value)
        assert not NTStatus(value).is_success
        assert str(as_error(value)) == "UNKNOWN"
        with pytest.raises(StatusError, match="^UNKNOWN$"):
            NTStatus(value).raise_for_status()

    @reset_unknown_policy()
    def test_error_keeps_success_and_known(self):
        set_unknown_policy(UnknownPolicy.ERROR)
        assert NT_STATUS_SUCCESS.as_error() is None
        assert str(NT_STATUS_TIMEOUT.as_error()) == "TIMEOUT"

    @reset_unknown_policy()
    def test_names_unaffected(self):
        set_unknown_policy(UnknownPolicy.ERROR)
        assert NTStatus(0xFFFFFFFF).name == "UNKNOWN"
        assert NT_STATUS_TIMEOUT.name == "TIMEOUT"


def test_version():
    assert nt_status.__version__ == ".".join(map(str, nt_status.version_info[:3]))


def test_exports():
    for name in nt_status.__all__:
        assert hasattr(nt_status, name), name
    assert "NT_STATUS_BUFFER_ALL_ZEROS" in nt_status.__all__
    assert nt_status.NT_STATUS_PENDING == NTStatus(0x103)
