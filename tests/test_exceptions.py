import copy
import pickle

import pytest

from nt_status import NT_STATUS_PENDING, NTStatus
from nt_status.exceptions import (
    CatalogError,
    CatalogNotFoundError,
    NTStatusError,
    StatusError,
)


class TestStatusError:
    def test_message(self):
        error = StatusError(NT_STATUS_PENDING)
        assert str(error) == "PENDING"
        assert error.args == ("PENDING",)
        assert error.status is NT_STATUS_PENDING

    def test_unknown(self):
        assert str(StatusError(NTStatus(0xFFFFFFFF))) == "UNKNOWN"

    def test_raisable(self):
        with pytest.raises(NTStatusError, match="^PENDING$"):
            raise StatusError(NT_STATUS_PENDING)

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy(self, copier):
        error = NT_STATUS_PENDING.as_error()
        duplicate = copier(error)
        assert type(duplicate) is StatusError
        assert str(duplicate) == "PENDING"
        assert duplicate.status == NT_STATUS_PENDING

    @pytest.mark.parametrize("value", [0x103, 0xC0020017, 0xFFFFFFFF])
    def test_pickle(self, value):
        error = StatusError(NTStatus(value))
        restored = pickle.loads(pickle.dumps(error))
        assert type(restored) is StatusError
        assert str(restored) == str(error)
        assert restored.args == error.args
        assert restored.status == NTStatus(value)


@pytest.mark.parametrize("cls", [StatusError, CatalogError, CatalogNotFoundError])
def test_base(cls):
    assert issubclass(cls, NTStatusError)


def test_catalog_not_found():
    assert issubclass(CatalogNotFoundError, CatalogError)
    assert issubclass(CatalogNotFoundError, FileNotFoundError)
