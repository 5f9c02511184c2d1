"""IP address and network-error helpers.

- is_timeout: recognise timeouts from sockets, asyncio and httpx
- ip_is_on: check whether an IP is configured on a local interface
- addr_from_net_addr: turn socket-style addresses into ipaddress objects
"""

from __future__ import annotations

import ipaddress
from typing import Callable, Iterable, TypeAlias

import httpx

from svckit.foundation.errors import AddressError, NetError
from svckit.runtime.observability import get_logger

from .hostport import split_host_port_lenient

IPAddress: TypeAlias = ipaddress.IPv4Address | ipaddress.IPv6Address
AddressProvider: TypeAlias = Callable[[], Iterable[str]]

_TIMEOUT_TYPES: tuple[type[BaseException], ...] = (TimeoutError, httpx.TimeoutException)

log = get_logger("netx.addr")


def is_timeout(exc: BaseException | None) -> bool:
    """Report whether ``exc`` or anything it was raised from is a timeout.

    Follows ``__cause__`` then ``__context__``. Besides the builtin and httpx
    timeout types, any exception exposing a callable ``timeout()`` that
    returns True counts.
    """
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        if isinstance(exc, _TIMEOUT_TYPES):
            return True
        timeout_fn = getattr(exc, "timeout", None)
        if callable(timeout_fn):
            try:
                timed_out = timeout_fn()
            except TypeError:
                timed_out = False
            if timed_out is True:
                return True
        exc = exc.__cause__ or exc.__context__
    return False


def interface_addresses() -> list[str]:
    """List IPv4 then IPv6 addresses of every local interface."""
    import netifaces

    found: list[str] = []
    for interface in netifaces.interfaces():
        addresses = netifaces.ifaddresses(interface)
        for family in (netifaces.AF_INET, netifaces.AF_INET6):
            found.extend(entry["addr"] for entry in addresses.get(family, ()) if "addr" in entry)
    return found


def _parse_interface_addr(value: str) -> IPAddress | None:
    # Interface listings may carry "/prefix" or a "%zone" suffix
    value = value.split("/", 1)[0].split("%", 1)[0]
    try:
        return ipaddress.ip_address(value)
    except ValueError:
        return None


def ip_is_on(ip: str, *, addresses: AddressProvider | None = None) -> bool:
    """Report whether ``ip`` is configured on a local network interface.

    Args:
        ip: Address to look for; empty or unparsable input gives False
        addresses: Zero-arg provider of interface addresses (defaults to
            :func:`interface_addresses`)

    Raises:
        NetError: If the interface addresses cannot be listed
    """
    if not ip:
        return False
    try:
        target = ipaddress.ip_address(ip)
    except ValueError:
        log.debug("ip rejected", ip=ip)
        return False

    provider = addresses or interface_addresses
    try:
        candidates = list(provider())
    except Exception as e:
        log.warning("interface lookup failed", error=str(e))
        raise NetError.from_exc(e, "listing interface addresses") from e

    return any(_parse_interface_addr(str(c)) == target for c in candidates)


def addr_from_net_addr(netaddr: object) -> IPAddress:
    """Convert a socket-style address to an ``ipaddress`` object.

    Accepts an ipaddress object, a ``(host, port, ...)`` tuple as returned by
    ``socket.getpeername()``, or anything whose ``str()`` is ``host[:port]``.

    Raises:
        AddressError: If the host part is not an IP literal
    """
    if isinstance(netaddr, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return netaddr

    if isinstance(netaddr, tuple) and netaddr:
        host = str(netaddr[0])
    else:
        host = split_host_port_lenient(str(netaddr)).host

    try:
        return ipaddress.ip_address(host)
    except ValueError as e:
        log.debug("address rejected", value=str(netaddr), host=host)
        raise AddressError.from_exc(e, f"cannot convert {netaddr!r}") from e
