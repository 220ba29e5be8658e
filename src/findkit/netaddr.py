"""Local network address discovery.

Only a narrow heuristic is applied: the first non-loopback IPv4 address whose
text contains ``prefix`` (``"192.168"`` by default) wins.  Any other private
or public address is ignored and ``"localhost"`` is returned instead, as it is
when the interfaces cannot be enumerated at all.
"""

from __future__ import annotations

import ipaddress
import socket

import psutil

from .utils.logging import get_logger

__all__ = ["DEFAULT_PREFIX", "FALLBACK_ADDRESS", "get_local_ip"]

DEFAULT_PREFIX = "192.168"
FALLBACK_ADDRESS = "localhost"

_log = get_logger("warning")


def get_local_ip(prefix: str = DEFAULT_PREFIX) -> str:
    """Return the first LAN IPv4 address matching ``prefix``."""

    try:
        interfaces = psutil.net_if_addrs()
    except OSError as exc:
        _log.warning("could not enumerate interfaces (%s); using %s", exc, FALLBACK_ADDRESS)
        return FALLBACK_ADDRESS

    for addrs in interfaces.values():
        for addr in addrs:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(addr.address)
            except ValueError:
                continue
            if ip.is_loopback:
                continue
            if prefix in str(ip):
                return str(ip)
    return FALLBACK_ADDRESS
