"""Network Address Resolution — first non-loopback IPv4 address of the host.

Invariants:
    - Interfaces scanned in enumeration order; first IPv4, non-loopback address wins
    - No candidates → "localhost" (not an error)
"""

import ipaddress
import socket
from typing import Iterable, Mapping

FALLBACK_ADDRESS = "localhost"


def _is_external_ipv4(family, address: str) -> bool:
    if family != socket.AF_INET:
        return False
    try:
        return not ipaddress.IPv4Address(address).is_loopback
    except ValueError:
        return False


def resolve_network_address(interfaces: Mapping[str, Iterable]) -> str:
    """Pick the address from a psutil.net_if_addrs()-shaped mapping.

    Each entry is an object with `family` and `address` attributes
    (psutil's snicaddr namedtuple).
    """
    for addrs in interfaces.values():
        for addr in addrs:
            if _is_external_ipv4(addr.family, addr.address):
                return addr.address
    return FALLBACK_ADDRESS
