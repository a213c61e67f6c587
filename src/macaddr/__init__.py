from __future__ import annotations

from .address import (
    BROADCAST,
    FORMATS,
    MAC_SIZE,
    OUI_SIZE,
    STYLES,
    add,
    broadcast,
    format,
    format_as,
    from_integer,
    ig_bit,
    is_broadcast,
    is_local,
    is_multicast,
    is_unicast,
    is_universal,
    mac,
    most_significant_24_bits,
    oui,
    parse,
    pred,
    random,
    split,
    subtract,
    succ,
    to_integer,
    to_string,
    ul_bit,
)
from .errors import (
    ArgumentError,
    IllegalCharacterError,
    MACAddrError,
    PreconditionError,
    UnexpectedTokenError,
)

__version__ = "0.1.0"

__all__ = [
    "BROADCAST",
    "FORMATS",
    "MAC_SIZE",
    "OUI_SIZE",
    "STYLES",
    "ArgumentError",
    "IllegalCharacterError",
    "MACAddrError",
    "PreconditionError",
    "UnexpectedTokenError",
    "add",
    "broadcast",
    "format",
    "format_as",
    "from_integer",
    "ig_bit",
    "is_broadcast",
    "is_local",
    "is_multicast",
    "is_unicast",
    "is_universal",
    "mac",
    "most_significant_24_bits",
    "oui",
    "parse",
    "pred",
    "random",
    "split",
    "subtract",
    "succ",
    "to_integer",
    "to_string",
    "ul_bit",
]
