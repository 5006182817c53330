from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

HEADER = "#EXTM3U"
EXTINF = "#EXTINF"
NEWLINE = "\n"


@dataclass
class Record:
    """A single playlist entry (one #EXTINF line plus its URL line)."""

    duration: float = 0.0
    attributes: Dict[str, str] = field(default_factory=dict)
    title: str = ""
    url: str = ""


@dataclass
class Playlist:
    """Ordered list of records, in file order."""

    records: List[Record] = field(default_factory=list)

    def add(self, record: Record) -> None:
        self.records.append(record)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def describe(self) -> str:
        """Debug dump: one `- title: ...` line and one indented URL line per record."""
        out = ""
        for r in self.records:
            out += (
                f"- title: {r.title}, duration: {r.duration:.0f}, "
                f"attrs: {r.attributes}\n  {r.url}\n"
            )
        return out

    def __str__(self) -> str:
        return self.describe()
