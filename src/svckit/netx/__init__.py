"""Network helpers: host:port splitting and IP address utilities.

Example:
    >>> from svckit.netx import split_host_port, SplitPolicy
    >>> host, port = split_host_port("[::1]:8080")
    >>> host, port
    ('::1', '8080')
"""

from svckit.foundation.config import SplitPolicy

from .addr import AddressProvider, IPAddress, addr_from_net_addr, interface_addresses, ip_is_on, is_timeout
from .hostport import (
    HostPort,
    HostPortSplitter,
    get_splitter,
    join_host_port,
    split_host_port,
    split_host_port_lenient,
    split_host_port_strict,
)

__all__ = [
    # Splitting
    "SplitPolicy", "HostPort", "HostPortSplitter", "get_splitter",
    "split_host_port", "split_host_port_lenient", "split_host_port_strict", "join_host_port",
    # Addresses
    "IPAddress", "AddressProvider", "addr_from_net_addr", "interface_addresses", "ip_is_on", "is_timeout",
]
