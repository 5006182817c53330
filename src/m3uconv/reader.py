"""Parse M3U text into a Playlist."""

from __future__ import annotations

import codecs
import io
import re
from typing import IO, Any, Iterator, List, Optional, Tuple, Union

from m3uconv import config
from m3uconv import logger as log

from .errors import (
    AttributeFormatError,
    FormatError,
    M3UError,
    NumberFormatError,
    UnknownDirectiveError,
)
from .models import EXTINF, HEADER, NEWLINE, Playlist, Record

log = log.get_logger()

_DURATION_RE = re.compile(r"[^\s,]+")
# decimal float literal; no digit separators or non-ASCII digits
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_ATTRIBUTE_RE = re.compile(r'(?P<name>[^=]+)="(?P<value>[^"]*)"')


def _lines(stream: IO[Any]) -> Iterator[str]:
    # Bytes go through one incremental decoder and are split after decoding,
    # so multi-byte encodings (utf-16) keep their alignment. Lines have no
    # length limit; only the "\n" terminator is removed.
    decoder = None
    buffered = ""
    for chunk in stream:
        if isinstance(chunk, bytes):
            if decoder is None:
                decoder = codecs.getincrementaldecoder(config.ENCODING)()
            chunk = decoder.decode(chunk)
        buffered += chunk
        *complete, buffered = buffered.split(NEWLINE)
        yield from complete

    if decoder is not None:
        buffered += decoder.decode(b"", final=True)
        *complete, buffered = buffered.split(NEWLINE)
        yield from complete
    if buffered:
        yield buffered


def _split_attributes(text: str) -> Optional[Tuple[List[str], str]]:
    """Split `text` at the first unquoted comma.

    Returns the whitespace-separated tokens before the comma (quoted runs kept
    intact, empty tokens included) and the title after it, or None when there
    is no unquoted comma.
    """
    tokens: List[str] = []
    current = ""
    in_quotes = False
    for i, ch in enumerate(text):
        if ch == '"':
            in_quotes = not in_quotes
            current += ch
        elif in_quotes:
            current += ch
        elif ch == ",":
            tokens.append(current)
            return tokens, text[i + 1 :]
        elif ch.isspace():
            tokens.append(current)
            current = ""
        else:
            current += ch
    return None


def parse_extinf(line: str, record: Optional[Record] = None) -> Record:
    """Parse an `#EXTINF:<duration>[ key="value" ...],<title>` line.

    Fills `record` (or a new Record) with duration, attributes and title and
    returns it. The record is only touched once the whole line is valid.
    """

    if record is None:
        record = Record()

    prefix = EXTINF + ":"
    if not line.startswith(prefix):
        raise FormatError(f"m3u: wrongly-formatted line: {line}", line)
    body = line[len(prefix) :]

    match = _DURATION_RE.match(body)
    split = _split_attributes(body[match.end() :]) if match else None
    if split is None:
        raise FormatError(f"m3u: wrongly-formatted line: {line}", line)
    tokens, title = split

    duration_text = match.group(0)
    if _FLOAT_RE.fullmatch(duration_text) is None:
        raise NumberFormatError(
            f"m3u: invalid duration '{duration_text}' on the line '{line}'",
            line,
            value=duration_text,
        )
    duration = float(duration_text)

    attributes = {}
    for token in tokens:
        if not token:
            continue
        attr = _ATTRIBUTE_RE.fullmatch(token)
        if attr is None:
            raise AttributeFormatError(
                f"m3u: wrongly-formatted attribute '{token}' on the line '{line}'",
                line,
                token=token,
            )
        attributes[attr.group("name")] = attr.group("value")

    record.duration = duration
    record.attributes = attributes
    record.title = title
    return record


def read(stream: IO[Any]) -> Playlist:
    """Read an M3U document from `stream`.

    Any malformed line aborts the whole read. An #EXTINF line that is never
    followed by a URL line is dropped.
    """

    playlist = Playlist()
    record = Record()
    pending = False

    for line in _lines(stream):
        # blank lines carry no URL, so they never commit the pending record
        if line == HEADER or not line:
            continue

        try:
            if line.startswith(EXTINF):
                parse_extinf(line, record)
                pending = True
                continue
            if line.startswith("#"):
                raise UnknownDirectiveError(f"m3u: unknown line {line}", line)
        except M3UError as e:
            log.error(f"❌ {e}")
            raise

        record.url = line
        playlist.add(record)
        record = Record()
        pending = False

    if pending:
        log.debug("Dropping trailing #EXTINF entry without a URL line")
    log.debug(f"Read {len(playlist)} M3U records")
    return playlist


def loads(data: Union[bytes, str]) -> Playlist:
    if isinstance(data, str):
        data = data.encode(config.ENCODING)
    return read(io.BytesIO(data))
