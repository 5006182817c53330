"""Serialize a Playlist into M3U text."""

from __future__ import annotations

import codecs
import io
from typing import IO, Any, Optional

from m3uconv import config
from m3uconv import logger as log

from .models import EXTINF, HEADER, NEWLINE, Playlist, Record

log = log.get_logger()


def format_record(record: Record) -> str:
    """Return the #EXTINF line and the URL line of one record."""
    return _extinf_line(record) + record.url + NEWLINE


def _extinf_line(record: Record) -> str:
    # duration is rounded for display only
    line = f"{EXTINF}:{record.duration:.0f}"
    for key, value in record.attributes.items():
        line += f' {key}="{value}"'
    return line + f",{record.title}{NEWLINE}"


def _emit(
    stream: IO[Any], text: str, encoder: Optional[codecs.IncrementalEncoder]
) -> None:
    if encoder is None:
        stream.write(text)
    else:
        stream.write(encoder.encode(text))


def write(stream: IO[Any], playlist: Playlist) -> None:
    """Write `playlist` to `stream` as an #EXTM3U document.

    Stream errors propagate as-is; lines already written stay in the sink.
    """

    # one encoder per document so a BOM is only emitted once
    encoder = None
    if not isinstance(stream, io.TextIOBase):
        encoder = codecs.getincrementalencoder(config.ENCODING)()

    _emit(stream, HEADER + NEWLINE, encoder)
    for record in playlist:
        _emit(stream, _extinf_line(record), encoder)
        _emit(stream, record.url + NEWLINE, encoder)
    log.debug(f"Wrote {len(playlist)} M3U records")


def dumps(playlist: Playlist) -> bytes:
    buf = io.BytesIO()
    write(buf, playlist)
    return buf.getvalue()
