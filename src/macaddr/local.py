from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass

import psutil

from .address import MAC_SIZE, parse
from .errors import ArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interface:
    name: str
    hardware_address: bytes
    ip_addresses: tuple[str, ...] = ()


def _strip_zone(ip: str) -> str:
    # fe80::1%eth0 -> fe80::1
    return ip.split("%", 1)[0]


def interfaces() -> list[Interface]:
    """
    Local interfaces that report a 48-bit link-layer address.
    """
    out: list[Interface] = []
    for name, addrs in psutil.net_if_addrs().items():
        hwaddr: bytes | None = None
        ips: list[str] = []
        for a in addrs:
            if a.family == psutil.AF_LINK:
                if not a.address:
                    continue
                try:
                    candidate = parse(a.address)
                except ArgumentError as e:
                    logger.debug("Skipping link address of %s: %s", name, e)
                    continue
                if len(candidate) == MAC_SIZE:
                    hwaddr = candidate
            elif a.family in (socket.AF_INET, socket.AF_INET6) and a.address:
                ips.append(_strip_zone(a.address))

        if hwaddr is None:
            logger.debug("Interface %s has no MAC address", name)
            continue
        out.append(Interface(name=name, hardware_address=hwaddr, ip_addresses=tuple(ips)))
    return out


def all_addresses() -> list[bytes]:
    return [i.hardware_address for i in interfaces()]


def by_interface(name: str) -> bytes | None:
    for i in interfaces():
        if i.name == name:
            return i.hardware_address
    return None


def by_ip_address(ip: str) -> bytes | None:
    """
    MAC address of the interface that has `ip` assigned, or None.
    """
    try:
        target = ipaddress.ip_address(_strip_zone(ip.strip()))
    except ValueError:
        raise ArgumentError(f"{ip!r} is not an IP address") from None

    for i in interfaces():
        for candidate in i.ip_addresses:
            try:
                if ipaddress.ip_address(candidate) == target:
                    return i.hardware_address
            except ValueError:
                logger.debug("Ignoring unparsable address %r on %s", candidate, i.name)
    return None
