from concurrent.futures import ThreadPoolExecutor

import pytest

from nt_status import (
    NT_STATUS_ABANDONED,
    NT_STATUS_ABANDONED_WAIT_0,
    NT_STATUS_ACCESS_DENIED,
    NT_STATUS_BUFFER_ALL_ZEROS,
    NT_STATUS_PENDING,
    NT_STATUS_SUCCESS,
    NT_STATUS_TIMEOUT,
    NT_STATUS_WAIT_0,
    NTStatus,
    StatusError,
    as_error,
    name,
    status,
)
from nt_status.codes import aliases, codes


class TestNTStatus:
    @pytest.mark.parametrize("value", [0, 1, 0x103, 0x7FFFFFFF, 0xC0000022, 0xFFFFFFFF])
    def test_value(self, value):
        assert NTStatus(value).value == value

    @pytest.mark.parametrize("value", [-1, 0x100000000, -0x80000000, 2**64])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="'value'"):
            NTStatus(value)

    @pytest.mark.parametrize("value", ["0", 1.0, None, True, b"\x00"])
    def test_invalid_type(self, value):
        with pytest.raises(TypeError, match="'value'"):
            NTStatus(value)

    def test_is_tuple(self):
        code = NTStatus(0x102)
        assert isinstance(code, tuple)
        assert len(code) == 1
        assert code[0] == 0x102

    def test_distinct_from_int(self):
        assert NTStatus(0x102) != 0x102
        assert NTStatus(0) != 0
        assert not isinstance(NTStatus(0), int)

    def test_equality(self):
        assert NTStatus(0x102) == NTStatus(0x102)
        assert NTStatus(0x102) != NTStatus(0x103)
        assert len({NTStatus(0x102), NTStatus(0x102), NT_STATUS_TIMEOUT}) == 1

    def test_immutable(self):
        code = NTStatus(0x102)
        with pytest.raises(AttributeError):
            code.value = 0x103

    @pytest.mark.parametrize("value", [0, 0x103, 0xC0000022, 0xFFFFFFFF])
    def test_int(self, value):
        assert int(NTStatus(value)) == value

    @pytest.mark.parametrize(
        "value,hex",
        [
            (0, "0x00000000"),
            (0x103, "0x00000103"),
            (0xC0000022, "0xC0000022"),
            (0xFFFFFFFF, "0xFFFFFFFF"),
        ],
    )
    def test_hex(self, value, hex):
        assert NTStatus(value).hex == hex

    @pytest.mark.parametrize(
        "value,signed",
        [
            (0, 0),
            (0x103, 0x103),
            (0x7FFFFFFF, 0x7FFFFFFF),
            (0x80000000, -0x80000000),
            (0xC0000001, -1073741823),
            (0xFFFFFFFF, -1),
        ],
    )
    def test_signed(self, value, signed):
        assert NTStatus(value).signed == signed

    class TestFromSigned:
        @pytest.mark.parametrize(
            "signed,value",
            [
                (0, 0),
                (0x103, 0x103),
                (0x7FFFFFFF, 0x7FFFFFFF),
                (-0x80000000, 0x80000000),
                (-1073741823, 0xC0000001),
                (-1, 0xFFFFFFFF),
            ],
        )
        def test_valid(self, signed, value):
            code = NTStatus.from_signed(signed)
            assert code == NTStatus(value)
            assert code.signed == signed

        @pytest.mark.parametrize("signed", [-0x80000001, 0x80000000, 0xFFFFFFFF])
        def test_out_of_range(self, signed):
            with pytest.raises(ValueError, match="'value'"):
                NTStatus.from_signed(signed)

        @pytest.mark.parametrize("signed", ["-1", -1.0, None, False])
        def test_invalid_type(self, signed):
            with pytest.raises(TypeError, match="'value'"):
                NTStatus.from_signed(signed)

        def test_instance_type(self):
            class SubNTStatus(NTStatus):
                pass

            assert type(NTStatus.from_signed(-1)) is NTStatus
            assert type(SubNTStatus.from_signed(-1)) is SubNTStatus

    class TestReplace:
        def test_valid(self):
            code = NTStatus(0)._replace(value=0x102)
            assert type(code) is NTStatus
            assert code == NT_STATUS_TIMEOUT

        def test_no_change(self):
            assert NT_STATUS_TIMEOUT._replace() == NT_STATUS_TIMEOUT

        @pytest.mark.parametrize("value", [-1, 0x100000000])
        def test_out_of_range(self, value):
            with pytest.raises(ValueError, match="'value'"):
                NTStatus(0)._replace(value=value)

        def test_invalid_type(self):
            with pytest.raises(TypeError, match="'value'"):
                NTStatus(0)._replace(value="0x102")

    class TestMake:
        def test_valid(self):
            code = NTStatus._make([0x102])
            assert type(code) is NTStatus
            assert code == NT_STATUS_TIMEOUT

        @pytest.mark.parametrize("value", [-1, 0x100000000])
        def test_out_of_range(self, value):
            with pytest.raises(ValueError, match="'value'"):
                NTStatus._make([value])

    class TestNew:
        def test_instance_type(self):
            class SubNTStatus(NTStatus):
                pass

            assert type(NTStatus._new(0)) is NTStatus
            assert type(SubNTStatus._new(0)) is SubNTStatus

        @pytest.mark.parametrize("value", [0, 0x103, 0xC0000022, 0xFFFFFFFF])
        def test_equal_to_normally_constructed(self, value):
            assert NTStatus._new(value) == NTStatus(value)


class TestName:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (NT_STATUS_SUCCESS, "SUCCESS"),
            (NT_STATUS_PENDING, "PENDING"),
            (NT_STATUS_TIMEOUT, "TIMEOUT"),
            (NT_STATUS_BUFFER_ALL_ZEROS, "BUFFER_ALL_ZEROS"),
            (NTStatus(0xFFFFFFFF), "UNKNOWN"),
        ],
    )
    def test_name(self, code, expected):
        assert code.name == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0x00000000, "SUCCESS"),
            (0x00000103, "PENDING"),
            (0x00000102, "TIMEOUT"),
            (0x00000117, "BUFFER_ALL_ZEROS"),
            (0xC0000022, "ACCESS_DENIED"),
            (0xC000006D, "LOGON_FAILURE"),
            (0xC0020017, "RPC_NT_SERVER_UNAVAILABLE"),
            (0x00010002, "DBG_CONTINUE"),
        ],
    )
    def test_known(self, value, expected):
        assert NTStatus(value).name == expected

    @pytest.mark.parametrize("value", [0xFFFFFFFF, 0xDEADBEEF, 0x0000FFFF])
    def test_unknown(self, value):
        assert value not in codes
        assert NTStatus(value).name == "UNKNOWN"

    def test_str(self):
        assert str(NT_STATUS_TIMEOUT) == "TIMEOUT"
        assert str(NTStatus(0xFFFFFFFF)) == "UNKNOWN"

    def test_no_prefix(self):
        assert not any(
            symbol.startswith(("STATUS_", "NT_STATUS_")) for symbol in codes.values()
        )

    def test_interned(self):
        assert NTStatus(0x102).name is NTStatus(0x102).name is codes[0x102]

    @pytest.mark.parametrize("value", [0, 1, 0x80, 0x103, 0xC0000001, 0xFFFFFFFF])
    def test_non_empty(self, value):
        assert NTStatus(value).name

    def test_aliases_dont_affect_name(self):
        assert NT_STATUS_WAIT_0.name == "SUCCESS"
        assert NT_STATUS_ABANDONED_WAIT_0.name == "ABANDONED"


class TestAsError:
    def test_success(self):
        assert NT_STATUS_SUCCESS.as_error() is None
        assert NTStatus(0).as_error() is None

    @pytest.mark.parametrize(
        "code,expected",
        [
            (NT_STATUS_PENDING, "PENDING"),
            (NT_STATUS_TIMEOUT, "TIMEOUT"),
            (NT_STATUS_BUFFER_ALL_ZEROS, "BUFFER_ALL_ZEROS"),
            (NT_STATUS_ACCESS_DENIED, "ACCESS_DENIED"),
            (NTStatus(0xC0020017), "RPC_NT_SERVER_UNAVAILABLE"),
            (NTStatus(0xC002001B), "RPC_NT_CALL_FAILED"),
        ],
    )
    def test_known(self, code, expected):
        error = code.as_error()
        assert isinstance(error, StatusError)
        assert str(error) == expected == code.name
        assert error.status is code

    @pytest.mark.parametrize("value", [0xFFFFFFFF, 0xDEADBEEF, 0x0000FFFF])
    def test_unknown(self, value):
        assert NTStatus(value).as_error() is None

    def test_every_known_non_zero_code(self):
        for value, symbol in codes.items():
            error = NTStatus(value).as_error()
            if value:
                assert str(error) == symbol
            else:
                assert error is None

    def test_idempotent(self):
        first = NT_STATUS_TIMEOUT.as_error()
        second = NT_STATUS_TIMEOUT.as_error()
        assert first is not second
        assert str(first) == str(second)
        assert first.status == second.status

    @pytest.mark.parametrize(
        "code,is_success",
        [
            (NT_STATUS_SUCCESS, True),
            (NT_STATUS_PENDING, False),
            (NT_STATUS_TIMEOUT, False),
            (NTStatus(0xFFFFFFFF), True),
        ],
    )
    def test_is_success(self, code, is_success):
        assert code.is_success is is_success

    class TestRaiseForStatus:
        @pytest.mark.parametrize("code", [NT_STATUS_SUCCESS, NTStatus(0xFFFFFFFF)])
        def test_no_error(self, code):
            assert code.raise_for_status() is None

        def test_error(self):
            with pytest.raises(StatusError, match="^TIMEOUT$") as info:
                NT_STATUS_TIMEOUT.raise_for_status()
            assert info.value.status == NT_STATUS_TIMEOUT


class TestFunctions:
    @pytest.mark.parametrize(
        "code,expected",
        [
            (0, "SUCCESS"),
            (0x103, "PENDING"),
            (NT_STATUS_TIMEOUT, "TIMEOUT"),
            (0xFFFFFFFF, "UNKNOWN"),
        ],
    )
    def test_name(self, code, expected):
        assert name(code) == expected

    def test_as_error(self):
        assert as_error(0) is None
        assert as_error(0xFFFFFFFF) is None
        assert str(as_error(0x103)) == "PENDING"
        assert str(as_error(NT_STATUS_TIMEOUT)) == "TIMEOUT"

    @pytest.mark.parametrize("function", [name, as_error])
    def test_invalid(self, function):
        with pytest.raises(ValueError):
            function(-1)
        with pytest.raises(TypeError):
            function("TIMEOUT")


class TestConstants:
    def test_every_code(self):
        for value, symbol in codes.items():
            constant = getattr(status, f"NT_STATUS_{symbol}")
            assert type(constant) is NTStatus
            assert constant.value == value
            assert constant.name == symbol

    def test_aliases(self):
        for symbol, value in aliases.items():
            assert getattr(status, f"NT_STATUS_{symbol}") == NTStatus(value)
        assert NT_STATUS_WAIT_0 == NT_STATUS_SUCCESS
        assert NT_STATUS_ABANDONED_WAIT_0 == NT_STATUS_ABANDONED

    def test_exported(self):
        assert len(status.__all__) == len(set(status.__all__))
        assert len(status.__all__) == 3 + len(codes) + len(aliases)
        assert "NT_STATUS_SUCCESS" in status.__all__
        assert "NT_STATUS_WAIT_0" in status.__all__

    @pytest.mark.parametrize(
        "constant,value",
        [
            (NT_STATUS_SUCCESS, 0x00000000),
            (NT_STATUS_PENDING, 0x00000103),
            (NT_STATUS_TIMEOUT, 0x00000102),
            (NT_STATUS_BUFFER_ALL_ZEROS, 0x00000117),
            (NT_STATUS_ACCESS_DENIED, 0xC0000022),
        ],
    )
    def test_values(self, constant, value):
        assert constant == NTStatus(value)


def test_concurrent_use():
    values = [*codes, 0xFFFFFFFF, 0xDEADBEEF]

    def project(value):
        code = NTStatus(value)
        error = code.as_error()
        return code.name, error and str(error)

    serial = list(map(project, values))
    with ThreadPoolExecutor(max_workers=8) as executor:
        assert list(executor.map(project, values)) == serial
