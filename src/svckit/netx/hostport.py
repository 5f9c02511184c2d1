"""Split "host:port" authority strings into host and port.

Two policies are available and neither ever raises; unparsable input is
echoed back as the host with an empty port.

- LENIENT (default): split at the last colon, whatever the port looks like.
  Brackets are only stripped when the closing ``]`` ends the string or is
  immediately followed by that last colon.
- STRICT: split at the last colon only if the tail is empty or all ASCII
  digits (RFC 3986 optional port), then strip one pair of enclosing brackets.

Example:
    >>> split_host_port("[2001:db8::1]:443")
    HostPort(host='2001:db8::1', port='443')
    >>> split_host_port("localhost:8.0")
    HostPort(host='localhost', port='8.0')
    >>> split_host_port("localhost:8.0", SplitPolicy.STRICT)
    HostPort(host='localhost:8.0', port='')

Note that round-tripping is not guaranteed: bracketed IPv6 hosts come back
without their brackets, and a bare IPv6 literal such as ``"ff00::"`` is split
at its last colon into ``("ff00:", "")``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, NamedTuple

from svckit.foundation.config import SplitPolicy, get_settings

_OPTIONAL_PORT = re.compile(r":[0-9]*")


class HostPort(NamedTuple):
    """Result of a split; unpacks as ``host, port``."""

    host: str
    port: str


def split_host_port_lenient(authority: str) -> HostPort:
    """Split at the last colon without validating the port."""
    i = authority.rfind(":")
    if i < 0:
        return HostPort(authority, "")

    if authority[0] != "[":
        return HostPort(authority[:i], authority[i + 1:])

    end = authority.find("]")
    if end < 0:
        return HostPort(authority, "")
    if end + 1 == len(authority):
        return HostPort(authority[1:end], "")
    if end + 1 == i:
        return HostPort(authority[1:end], authority[i + 1:])

    # "]" followed by something other than the last colon
    return HostPort(authority, "")


def split_host_port_strict(authority: str) -> HostPort:
    """Split only when the port is empty or all digits, then unbracket."""
    host, port = authority, ""
    colon = host.rfind(":")
    if colon != -1 and _OPTIONAL_PORT.fullmatch(host, colon):
        host, port = host[:colon], host[colon + 1:]
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return HostPort(host, port)


_SPLITTERS: dict[SplitPolicy, Callable[[str], HostPort]] = {
    SplitPolicy.LENIENT: split_host_port_lenient,
    SplitPolicy.STRICT: split_host_port_strict,
}


@dataclass(frozen=True, slots=True)
class HostPortSplitter:
    """Host:port splitting strategy bound to one policy.

    Pass one of these to code that needs to split addresses instead of
    relying on the process-wide default.

    Example:
        >>> strict = HostPortSplitter(SplitPolicy.STRICT)
        >>> strict("[abc]")
        HostPort(host='abc', port='')
    """

    policy: SplitPolicy = SplitPolicy.LENIENT

    def __call__(self, authority: str) -> HostPort:
        return _SPLITTERS[self.policy](authority)

    def host(self, authority: str) -> str:
        return self(authority).host

    def port(self, authority: str) -> str:
        return self(authority).port


@lru_cache(maxsize=len(SplitPolicy))
def _splitter_for(policy: SplitPolicy) -> HostPortSplitter:
    return HostPortSplitter(policy)


def get_splitter(policy: SplitPolicy | str | None = None) -> HostPortSplitter:
    """Return the splitter for ``policy``; None means the configured default."""
    if policy is None:
        policy = get_settings().net.split_policy
    return _splitter_for(SplitPolicy(policy))


def split_host_port(authority: str, policy: SplitPolicy | str | None = None) -> HostPort:
    """Separate host and port from "host:port", "ipv4:port" or "[ipv6]:port".

    Neither host nor port is validated beyond what the policy requires.

    Args:
        authority: String to split; may be empty
        policy: LENIENT or STRICT; None uses SVCKIT_NET_SPLIT_POLICY

    Examples:
        "example.com:80"  -> ("example.com", "80")
        "1.2.3.4"         -> ("1.2.3.4", "")
        "[ff00::1]:80"    -> ("ff00::1", "80")
        "[ff00::]"        -> ("ff00::", "")
        "ff00::"          -> ("ff00:", "")
    """
    if policy is None:
        policy = get_settings().net.split_policy
    return _SPLITTERS[SplitPolicy(policy)](authority)


def join_host_port(host: str, port: int | str) -> str:
    """Combine host and port, bracketing hosts that contain a colon.

    Hosts that already start with ``[`` are used as given.

    ``join_host_port("::1", 80)`` gives ``"[::1]:80"``. An empty port gives
    ``"host:"`` so the result still splits back into the same pair.
    """
    if ":" in host and not host.startswith("["):
        return f"[{host}]:{port}"
    return f"{host}:{port}"
