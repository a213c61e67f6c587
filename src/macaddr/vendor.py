from __future__ import annotations

from manuf import manuf

from .address import MAC_SIZE, format_as, is_local, most_significant_24_bits

LOCAL_LABEL = "Local / randomized MAC"


class OUILookup:
    """
    Thin wrapper around `manuf` OUI database. Display only: an OUI missing
    from the database is still a perfectly good OUI.
    """

    def __init__(self) -> None:
        self._parser = manuf.MacParser()

    def manufacturer(self, address: bytes) -> str | None:
        # Locally administered: upper half doesn't identify anyone
        if is_local(address):
            return LOCAL_LABEL

        # Full address so MA-M / MA-S (28-, 36-bit) blocks resolve
        if len(address) == MAC_SIZE:
            full = bytes(address)
        else:
            upper = most_significant_24_bits(address)
            full = upper + b"\x00" * (MAC_SIZE - len(upper))
        return self._parser.get_manuf(format_as(full, "colon_separated"))
