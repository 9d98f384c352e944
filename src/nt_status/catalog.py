"""
.. NTSTATUS catalog regeneration

The name table in :py:mod:`nt_status.codes` is generated from a published
``ntstatus.h`` header rather than maintained by hand. A regeneration goes thus::

    text = fetch_header()
    codes, aliases = build_table(parse_header(text))
    source = render_module(codes, aliases)
"""

from __future__ import annotations

__all__ = (
    "DEFAULT_HEADER_URL",
    "build_table",
    "fetch_header",
    "parse_header",
    "render_module",
)

import logging
import re
from collections.abc import Iterable, Mapping

import requests

from ._utils import arg_type_error, arg_value_error_range
from .exceptions import CatalogError, CatalogNotFoundError

#: Location of the ``ntstatus.h`` header shipped with mingw-w64
DEFAULT_HEADER_URL = (
    "https://raw.githubusercontent.com/mingw-w64/mingw-w64/master/"
    "mingw-w64-headers/include/ntstatus.h"
)

# Only definitions with the `(NTSTATUS)` cast are status values. Others, such as the
# severity constants some headers define, are not.
_DEFINE_RE = re.compile(
    r"^[ \t]*#[ \t]*define[ \t]+(?:STATUS_)?([A-Z][A-Z0-9_]*)[ \t]+"
    r"\([ \t]*\([ \t]*NTSTATUS[ \t]*\)[ \t]*0[xX]([0-9A-Fa-f]+)[uUlL]*[ \t]*\)",
    re.M,
)

_MODULE_HEADER = '''\
"""
.. The NTSTATUS name table

Symbolic names of the NTSTATUS values published by Microsoft ([MS-ERREF] 2.3.1),
without the ``STATUS_`` prefix. Names with other prefixes (e.g ``RPC_NT_``,
``DBG_``) are kept verbatim.

This file is generated by :py:func:`nt_status.catalog.render_module`. Do not edit.
"""

from __future__ import annotations

__all__ = ("codes", "aliases")

from types import MappingProxyType

'''


def build_table(
    entries: Iterable[tuple[str, int]],
) -> tuple[dict[int, str], dict[str, int]]:
    """Folds catalog entries into a name table.

    Args:
        entries: ``(name, value)`` pairs, as returned by :py:func:`parse_header`.

    Returns:
        A 2-tuple containing:

        * the name table, mapping each value to a single name
        * the aliases, mapping every other name to its value

    Raises:
        nt_status.exceptions.CatalogError: The same name is defined with different
          values.

    The first name defined for a value is kept, except that an indexed wait name
    (e.g ``WAIT_0``, ``ABANDONED_WAIT_0``) yields to a plain name defined later for
    the same value (e.g ``SUCCESS``, ``ABANDONED``).
    """
    codes: dict[int, str] = {}
    aliases: dict[str, int] = {}
    seen: dict[str, int] = {}

    for name, value in entries:
        if name in seen:
            if seen[name] != value:
                raise CatalogError(
                    f"Conflicting values for {name!r} "
                    f"(got: 0x{seen[name]:08X} and 0x{value:08X})"
                )
            _logger.debug(f"Skipping redefinition of {name!r}")
            continue
        seen[name] = value

        current = codes.get(value)
        if current is None:
            codes[value] = name
        elif _is_wait_name(current) and not _is_wait_name(name):
            codes[value] = name
            aliases[current] = value
            _logger.debug(f"{current!r} is an alias of {name!r}")
        else:
            aliases[name] = value
            _logger.debug(f"{name!r} is an alias of {current!r}")

    return codes, aliases


def fetch_header(url: str = DEFAULT_HEADER_URL, timeout: float = 30.0) -> str:
    """Downloads an ``ntstatus.h`` header.

    Args:
        url: The URL of the header.
        timeout: Time limit for the request, in seconds.

    Returns:
        The text of the header.

    Raises:
        TypeError: *url* is not a string.
        nt_status.exceptions.CatalogNotFoundError: The URL does not exist.
        nt_status.exceptions.CatalogError: The request failed.
    """
    if not isinstance(url, str):
        raise arg_type_error("url", url)

    _logger.info(f"Downloading NTSTATUS catalog from {url!r}")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise CatalogError(f"Failed to download {url!r}") from e

    if response.status_code == 404:
        raise CatalogNotFoundError(f"URL {url!r} does not exist.")
    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        raise CatalogError(f"Failed to download {url!r}") from e

    return response.text


def parse_header(text: str) -> list[tuple[str, int]]:
    """Extracts the NTSTATUS definitions in a C header.

    Args:
        text: The text of the header.

    Returns:
        ``(name, value)`` pairs, in order of definition, with the ``STATUS_``
        prefix stripped from names. Other names (e.g ``RPC_NT_...``, ``DBG_...``)
        are kept verbatim.

    Raises:
        TypeError: *text* is not a string.
        nt_status.exceptions.CatalogError: A value does not fit in 32 bits.

    Recognizes definitions of the form ``#define NAME ((NTSTATUS)0x...L)``.
    Every other line is ignored.
    """
    if not isinstance(text, str):
        raise arg_type_error("text", text)

    entries = []
    for match in _DEFINE_RE.finditer(text):
        name, digits = match.groups()
        value = int(digits, 16)
        if value & ~0xFFFFFFFF:
            raise CatalogError(
                f"Value of {name!r} does not fit in 32 bits (got: 0x{digits})"
            )
        entries.append((name, value))

    return entries


def render_module(codes: Mapping[int, str], aliases: Mapping[str, int]) -> str:
    """Generates the source of :py:mod:`nt_status.codes`.

    Args:
        codes: The name table, as returned by :py:func:`build_table`.
        aliases: The aliases, as returned by :py:func:`build_table`.

    Returns:
        The source text of the module. Table entries are ordered by value, aliases
        are kept in the given order.

    Raises:
        ValueError: A value is out of the range of a 32-bit word.
    """
    for value in (*codes, *aliases.values()):
        if value & ~0xFFFFFFFF:
            raise arg_value_error_range("value", value)

    lines = [_MODULE_HEADER, "codes = MappingProxyType(\n    {\n"]
    lines.extend(
        f'        0x{value:08X}: "{codes[value]}",\n' for value in sorted(codes)
    )
    lines.append("    }\n)\n\naliases = MappingProxyType(\n    {\n")
    lines.extend(
        f'        "{name}": 0x{value:08X},\n' for name, value in aliases.items()
    )
    lines.append("    }\n)\n")

    return "".join(lines)


def _is_wait_name(name: str) -> bool:
    return name.endswith("WAIT_0")


_logger = logging.getLogger(__name__)
