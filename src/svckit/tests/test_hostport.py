"""Tests for host:port splitting.

Validates:
- Lenient policy on the full edge-case table
- Strict policy (RFC 3986 optional port)
- Where the two policies disagree
- Policy selection via splitter objects and settings
"""

from __future__ import annotations

import pytest

from svckit.foundation.config import SplitPolicy, clear_settings_cache
from svckit.netx import (
    HostPort,
    HostPortSplitter,
    get_splitter,
    join_host_port,
    split_host_port,
    split_host_port_lenient,
    split_host_port_strict,
)


# ═════════════════════════════════════════════════════════════════════════════
# Lenient
# ═════════════════════════════════════════════════════════════════════════════


LENIENT_CASES = [
    ("", "", ""),
    # IPv4
    ("1.2.3.4", "1.2.3.4", ""),
    ("1.2.3.4:80", "1.2.3.4", "80"),
    ("1.2.3.4:8080", "1.2.3.4", "8080"),
    # IPv6
    ("ff00::", "ff00:", ""),
    ("[ff00::]", "ff00::", ""),
    ("[ff00::]:80", "ff00::", "80"),
    ("[2001:db8::1]", "2001:db8::1", ""),
    ("[2001:db8::1]:443", "2001:db8::1", "443"),
    # Hostnames
    ("localhost", "localhost", ""),
    ("localhost:80", "localhost", "80"),
    ("example.com:443", "example.com", "443"),
    # Incomplete brackets
    ("[abc", "[abc", ""),
    ("[abc]", "[abc]", ""),
    ("[abc]:80", "abc", "80"),
    # Non-digit ports pass through
    ("1.2.3.4:80a", "1.2.3.4", "80a"),
    ("localhost:8.0", "localhost", "8.0"),
    ("[ff00::]:80x", "ff00::", "80x"),
    # Empty ports
    ("1.2.3.4:", "1.2.3.4", ""),
    ("[ff00::]:", "ff00::", ""),
    # Last colon wins
    ("host:port:80", "host:port", "80"),
    ("host::80", "host:", "80"),
    # Garbage after the bracket
    ("[abc]xyz", "[abc]xyz", ""),
    ("[abc]:80:extra", "[abc]:80:extra", ""),
    ("[ff00::]extra", "[ff00::]extra", ""),
    ("[ff00::]:80:extra", "[ff00::]:80:extra", ""),
    ("[]", "[]", ""),
    ("[]:", "", ""),
    ("[]:80", "", "80"),
    # Single characters and short forms
    ("[", "[", ""),
    ("]", "]", ""),
    ("[:", "[:", ""),
    ("]:", "]", ""),
    (":", "", ""),
    ("a:", "a", ""),
    (":a", "", "a"),
    ("a]", "a]", ""),
    ("[::]", "::", ""),
    ("[::]:80", "::", "80"),
    ("2001:db8::1:2:3:4", "2001:db8::1:2:3", "4"),
    (":::80", "::", "80"),
    ("::::", ":::", ""),
    ("[a:b]", "a:b", ""),
    ("[a:b]:80", "a:b", "80"),
]


@pytest.mark.parametrize(("authority", "host", "port"), LENIENT_CASES)
def test_lenient_split(authority: str, host: str, port: str) -> None:
    assert split_host_port_lenient(authority) == (host, port)


def test_result_unpacks_and_names_fields() -> None:
    result = split_host_port_lenient("example.com:443")
    host, port = result
    assert isinstance(result, HostPort)
    assert (result.host, result.port) == (host, port) == ("example.com", "443")


# ═════════════════════════════════════════════════════════════════════════════
# Strict
# ═════════════════════════════════════════════════════════════════════════════


STRICT_CASES = [
    ("", "", ""),
    ("1.2.3.4", "1.2.3.4", ""),
    ("1.2.3.4:80", "1.2.3.4", "80"),
    ("[2001:db8::1]:443", "2001:db8::1", "443"),
    ("[2001:db8::1]", "2001:db8::1", ""),
    ("localhost:80", "localhost", "80"),
    ("localhost:8.0", "localhost:8.0", ""),
    ("1.2.3.4:80a", "1.2.3.4:80a", ""),
    ("ff00::", "ff00:", ""),
    ("[abc", "[abc", ""),
    ("[abc]", "abc", ""),
    ("[abc]:80", "abc", "80"),
    ("[ff00::]:", "ff00::", ""),
    ("host:port:80", "host:port", "80"),
    ("localhost:٣", "localhost:٣", ""),  # non-ASCII digit
]


@pytest.mark.parametrize(("authority", "host", "port"), STRICT_CASES)
def test_strict_split(authority: str, host: str, port: str) -> None:
    assert split_host_port_strict(authority) == (host, port)


@pytest.mark.parametrize(
    ("authority", "lenient", "strict"),
    [
        ("[abc]", ("[abc]", ""), ("abc", "")),
        ("localhost:8.0", ("localhost", "8.0"), ("localhost:8.0", "")),
        ("[ff00::]extra", ("[ff00::]extra", ""), ("[ff00::]extra", "")),
    ],
)
def test_policies_disagree(authority: str, lenient: tuple[str, str], strict: tuple[str, str]) -> None:
    assert split_host_port(authority, SplitPolicy.LENIENT) == lenient
    assert split_host_port(authority, SplitPolicy.STRICT) == strict


# ═════════════════════════════════════════════════════════════════════════════
# Properties
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("policy", list(SplitPolicy))
@pytest.mark.parametrize("authority", ["1.2.3.4:80", "localhost:80", "example.com", "a:", ""])
def test_resplitting_colon_free_host_is_identity(policy: SplitPolicy, authority: str) -> None:
    host, _ = split_host_port(authority, policy)
    assert ":" not in host
    assert split_host_port(host, policy) == (host, "")


def test_round_trip_loses_brackets() -> None:
    host, port = split_host_port("[::1]:80")
    assert f"{host}:{port}" != "[::1]:80"
    assert join_host_port(host, port) == "[::1]:80"


@pytest.mark.parametrize(
    ("host", "port", "expected"),
    [
        ("example.com", 80, "example.com:80"),
        ("1.2.3.4", "443", "1.2.3.4:443"),
        ("2001:db8::1", 443, "[2001:db8::1]:443"),
        ("localhost", "", "localhost:"),
    ],
)
def test_join_host_port(host: str, port: int | str, expected: str) -> None:
    joined = join_host_port(host, port)
    assert joined == expected
    assert split_host_port(joined) == (host, str(port))


def test_join_host_port_keeps_existing_brackets() -> None:
    joined = join_host_port("[::1]", 80)
    assert joined == "[::1]:80"
    assert split_host_port(joined) == ("::1", "80")


# ═════════════════════════════════════════════════════════════════════════════
# Policy selection
# ═════════════════════════════════════════════════════════════════════════════


def test_default_policy_is_lenient() -> None:
    assert split_host_port("localhost:8.0") == ("localhost", "8.0")
    assert get_splitter().policy is SplitPolicy.LENIENT


def test_default_policy_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SVCKIT_NET_SPLIT_POLICY", "STRICT")
    clear_settings_cache()
    assert split_host_port("localhost:8.0") == ("localhost:8.0", "")
    assert get_splitter().policy is SplitPolicy.STRICT
    # An explicit policy still wins
    assert split_host_port("localhost:8.0", "lenient") == ("localhost", "8.0")


def test_splitter_object() -> None:
    strict = HostPortSplitter(SplitPolicy.STRICT)
    assert strict("[abc]") == ("abc", "")
    assert strict.host("example.com:80") == "example.com"
    assert strict.port("example.com:80") == "80"
    assert HostPortSplitter()("[abc]") == ("[abc]", "")


def test_get_splitter_is_cached_per_policy() -> None:
    assert get_splitter("strict") is get_splitter(SplitPolicy.STRICT)
    assert get_splitter("strict") is not get_splitter("lenient")


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError):
        split_host_port("a:1", "loose")
