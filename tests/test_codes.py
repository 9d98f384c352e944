import re

import pytest

from nt_status.codes import aliases, codes

NAME_RE = re.compile(r"[A-Z0-9]+(?:_[A-Z0-9]+)*")


def test_success():
    assert codes[0x00000000] == "SUCCESS"


def test_size():
    # Microsoft's published catalog, less the aliases
    assert len(codes) == 2691


@pytest.mark.parametrize(
    "value,symbol",
    [
        (0x00000102, "TIMEOUT"),
        (0x00000103, "PENDING"),
        (0x00000117, "BUFFER_ALL_ZEROS"),
        (0x80000005, "BUFFER_OVERFLOW"),
        (0xC0000001, "UNSUCCESSFUL"),
        (0xC0000016, "MORE_PROCESSING_REQUIRED"),
        (0xC0000022, "ACCESS_DENIED"),
        (0xC0000034, "OBJECT_NAME_NOT_FOUND"),
        (0xC000006D, "LOGON_FAILURE"),
        (0xC00000BB, "NOT_SUPPORTED"),
        (0xC00000CC, "BAD_NETWORK_NAME"),
        (0x00010001, "DBG_EXCEPTION_HANDLED"),
        (0x00010002, "DBG_CONTINUE"),
        (0x40010005, "DBG_CONTROL_C"),
        (0xC0020017, "RPC_NT_SERVER_UNAVAILABLE"),
        (0xC002001B, "RPC_NT_CALL_FAILED"),
        (0xC0020036, "EPT_NT_NOT_REGISTERED"),
        (0xC0030001, "RPC_NT_NO_MORE_ENTRIES"),
    ],
)
def test_well_known(value, symbol):
    assert codes[value] == symbol


def test_names():
    for symbol in codes.values():
        assert NAME_RE.fullmatch(symbol), symbol


def test_values():
    for value in codes:
        assert type(value) is int
        assert 0 <= value <= 0xFFFFFFFF


def test_unique_names():
    assert len(set(codes.values())) == len(codes)


class TestAliases:
    def test_names(self):
        for symbol in aliases:
            assert NAME_RE.fullmatch(symbol), symbol

    def test_values_known(self):
        for value in aliases.values():
            assert value in codes

    def test_not_primary_names(self):
        assert not set(aliases) & set(codes.values())

    def test_members(self):
        assert dict(aliases) == {"WAIT_0": 0x00000000, "ABANDONED_WAIT_0": 0x00000080}


def test_read_only():
    with pytest.raises(TypeError):
        codes[0xFFFFFFFF] = "FOO"
    with pytest.raises(TypeError):
        del codes[0]
    with pytest.raises(TypeError):
        aliases["FOO"] = 0
