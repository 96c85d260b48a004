"""The text packet exchanged between clients and servers."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY_DATA = "_"
SEPARATOR = ";"


@dataclass
class Packet:
    """A header plus optional data, serialised as ``header;data``."""

    header: str
    data: str | None = None

    def unwrap_data(self) -> str:
        """Return the data, or ``"_"`` when there is none."""
        return self.data if self.data is not None else EMPTY_DATA

    def marshall(self) -> str:
        """Serialise the packet to its wire form."""
        return f"{self.header}{SEPARATOR}{self.unwrap_data()}"

    @staticmethod
    def unmarshall(serialized: str) -> Packet:
        """Parse a packet from its wire form.

        Only the first separator splits header from data; a data part of
        ``"_"`` or a missing separator means no data.
        """
        header, separator, rest = serialized.partition(SEPARATOR)
        data = rest if separator and rest != EMPTY_DATA else None
        return Packet(header, data)