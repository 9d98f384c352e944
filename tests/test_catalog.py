import os

import pytest
import requests

from nt_status import catalog, codes as codes_module
from nt_status.catalog import build_table, fetch_header, parse_header, render_module
from nt_status.codes import aliases, codes
from nt_status.exceptions import CatalogError, CatalogNotFoundError

HEADER = """\
#ifndef _NTSTATUS_
#define _NTSTATUS_

#define STATUS_SEVERITY_SUCCESS 0x0
#define STATUS_SEVERITY_ERROR 0x3

#define STATUS_WAIT_0 ((NTSTATUS)0x00000000L)
#define STATUS_SUCCESS ((NTSTATUS)0x00000000L)
#define STATUS_WAIT_1 ((NTSTATUS)0x00000001)
#define STATUS_ABANDONED ((NTSTATUS) 0x00000080)
#define STATUS_ABANDONED_WAIT_0 ((NTSTATUS)0x00000080L)
/* STATUS_COMMENTED ((NTSTATUS)0x00000099L) */
#define STATUS_TIMEOUT ((NTSTATUS)0x00000102L)
  #  define   STATUS_PENDING   ( (NTSTATUS) 0x00000103L )
#define STATUS_ACCESS_DENIED ((NTSTATUS)0xc0000022L)
#define DBG_EXCEPTION_HANDLED ((NTSTATUS)0x00010001L)
#define RPC_NT_SERVER_UNAVAILABLE ((NTSTATUS)0xC0020017L)
#define FACILITY_DEBUGGER 0x1

#endif
"""


class TestParseHeader:
    def test_entries(self):
        assert parse_header(HEADER) == [
            ("WAIT_0", 0x00000000),
            ("SUCCESS", 0x00000000),
            ("WAIT_1", 0x00000001),
            ("ABANDONED", 0x00000080),
            ("ABANDONED_WAIT_0", 0x00000080),
            ("TIMEOUT", 0x00000102),
            ("PENDING", 0x00000103),
            ("ACCESS_DENIED", 0xC0000022),
            ("DBG_EXCEPTION_HANDLED", 0x00010001),
            ("RPC_NT_SERVER_UNAVAILABLE", 0xC0020017),
        ]

    def test_empty(self):
        assert parse_header("") == []
        assert parse_header("#define STATUS_SEVERITY_WARNING 0x2\n") == []

    def test_value_out_of_range(self):
        with pytest.raises(CatalogError, match="'TOO_BIG'"):
            parse_header("#define STATUS_TOO_BIG ((NTSTATUS)0x100000000L)\n")

    @pytest.mark.parametrize("text", [None, b"#define", 1])
    def test_invalid_type(self, text):
        with pytest.raises(TypeError, match="'text'"):
            parse_header(text)


class TestBuildTable:
    def test_header(self):
        codes, aliases = build_table(parse_header(HEADER))
        assert codes == {
            0x00000000: "SUCCESS",
            0x00000001: "WAIT_1",
            0x00000080: "ABANDONED",
            0x00000102: "TIMEOUT",
            0x00000103: "PENDING",
            0xC0000022: "ACCESS_DENIED",
            0x00010001: "DBG_EXCEPTION_HANDLED",
            0xC0020017: "RPC_NT_SERVER_UNAVAILABLE",
        }
        assert aliases == {"WAIT_0": 0x00000000, "ABANDONED_WAIT_0": 0x00000080}
        assert list(aliases) == ["WAIT_0", "ABANDONED_WAIT_0"]

    def test_first_name_kept(self):
        codes, aliases = build_table([("FIRST", 1), ("SECOND", 1)])
        assert codes == {1: "FIRST"}
        assert aliases == {"SECOND": 1}

    def test_wait_name_kept_without_plain_name(self):
        codes, aliases = build_table([("WAIT_0", 0), ("ABANDONED_WAIT_0", 0x80)])
        assert codes == {0: "WAIT_0", 0x80: "ABANDONED_WAIT_0"}
        assert aliases == {}

    def test_redefinition(self):
        codes, aliases = build_table([("TIMEOUT", 0x102), ("TIMEOUT", 0x102)])
        assert codes == {0x102: "TIMEOUT"}
        assert aliases == {}

    def test_conflicting_redefinition(self):
        with pytest.raises(CatalogError, match="'TIMEOUT'"):
            build_table([("TIMEOUT", 0x102), ("TIMEOUT", 0x103)])

    def test_empty(self):
        assert build_table([]) == ({}, {})


class TestRenderModule:
    def test_matches_shipped_table(self):
        with open(codes_module.__file__, encoding="utf-8") as f:
            assert render_module(codes, aliases) == f.read()

    def test_ordered_by_value(self):
        source = render_module({0xC0000022: "ACCESS_DENIED", 0: "SUCCESS"}, {})
        assert source.index("0x00000000") < source.index("0xC0000022")

    def test_executable(self):
        table, aliases_ = build_table(parse_header(HEADER))
        namespace = {}
        exec(render_module(table, aliases_), namespace)
        assert dict(namespace["codes"]) == table
        assert dict(namespace["aliases"]) == aliases_

    @pytest.mark.parametrize(
        "codes_,aliases_",
        [({-1: "NEGATIVE"}, {}), ({}, {"TOO_BIG": 0x100000000})],
    )
    def test_out_of_range(self, codes_, aliases_):
        with pytest.raises(ValueError, match="'value'"):
            render_module(codes_, aliases_)


class FakeResponse(requests.Response):
    def __init__(self, url, status_code, text=""):
        super().__init__()
        self.url = url
        self.status_code = status_code
        self.encoding = "utf-8"
        self._content = text.encode()


class TestFetchHeader:
    url = "https://example.com/ntstatus.h"

    def test_default_url(self):
        assert catalog.DEFAULT_HEADER_URL.startswith("https://")
        assert os.path.basename(catalog.DEFAULT_HEADER_URL) == "ntstatus.h"

    def test_ok(self, monkeypatch):
        calls = []

        def get(url, **kwargs):
            calls.append((url, kwargs))
            return FakeResponse(url, 200, HEADER)

        monkeypatch.setattr(catalog.requests, "get", get)
        assert fetch_header(self.url, timeout=5.0) == HEADER
        assert calls == [(self.url, {"timeout": 5.0})]

    def test_default_url_used(self, monkeypatch):
        urls = []

        def get(url, **kwargs):
            urls.append(url)
            return FakeResponse(url, 200, HEADER)

        monkeypatch.setattr(catalog.requests, "get", get)
        fetch_header()
        assert urls == [catalog.DEFAULT_HEADER_URL]

    def test_not_found(self, monkeypatch):
        monkeypatch.setattr(
            catalog.requests, "get", lambda url, **_: FakeResponse(url, 404)
        )
        with pytest.raises(CatalogNotFoundError, match="does not exist"):
            fetch_header(self.url)
        with pytest.raises(FileNotFoundError):
            fetch_header(self.url)

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(
            catalog.requests, "get", lambda url, **_: FakeResponse(url, 500)
        )
        with pytest.raises(CatalogError, match="Failed to download") as info:
            fetch_header(self.url)
        assert not isinstance(info.value, CatalogNotFoundError)
        assert isinstance(info.value.__cause__, requests.HTTPError)

    def test_connection_error(self, monkeypatch):
        def get(url, **kwargs):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(catalog.requests, "get", get)
        with pytest.raises(CatalogError, match="Failed to download") as info:
            fetch_header(self.url)
        assert isinstance(info.value.__cause__, requests.ConnectionError)

    @pytest.mark.parametrize("url", [None, b"https://example.com", 1])
    def test_invalid_type(self, url):
        with pytest.raises(TypeError, match="'url'"):
            fetch_header(url)

    def test_logs_download(self, monkeypatch, caplog):
        monkeypatch.setattr(
            catalog.requests, "get", lambda url, **_: FakeResponse(url, 200, HEADER)
        )
        with caplog.at_level("INFO", logger="nt_status.catalog"):
            fetch_header(self.url)
        assert self.url in caplog.text
