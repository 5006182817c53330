import codecs
import io

import pytest

from m3uconv import writer
from m3uconv.models import Playlist, Record


def _playlist(*records):
    p = Playlist()
    for r in records:
        p.add(r)
    return p


def test_write_empty_playlist_is_header_only():
    assert writer.dumps(Playlist()) == b"#EXTM3U\n"


def test_write_records_in_order():
    p = _playlist(
        Record(duration=10, title="Song A", url="http://a"),
        Record(duration=20, attributes={"tvg-id": "1"}, title="B", url="http://b"),
    )
    assert writer.dumps(p).decode() == (
        "#EXTM3U\n"
        "#EXTINF:10,Song A\n"
        "http://a\n"
        '#EXTINF:20 tvg-id="1",B\n'
        "http://b\n"
    )


def test_write_attributes_follow_insertion_order():
    r = Record(attributes={"b": "2", "a": "1"}, title="T", url="u")
    assert writer.format_record(r) == '#EXTINF:0 b="2" a="1",T\nu\n'


@pytest.mark.parametrize(
    "duration, rendered",
    [(123.7, "124"), (12.6, "13"), (12.4, "12"), (-1, "-1"), (0.0, "0")],
)
def test_write_rounds_duration_for_display_only(duration, rendered):
    r = Record(duration=duration, title="t", url="u")
    assert writer.format_record(r).startswith(f"#EXTINF:{rendered},")
    assert r.duration == duration


def test_write_does_not_escape_quotes():
    r = Record(attributes={"k": 'say "hi"'}, title="t", url="u")
    assert writer.format_record(r) == '#EXTINF:0 k="say "hi"",t\nu\n'


def test_write_to_text_stream():
    buf = io.StringIO()
    writer.write(buf, _playlist(Record(duration=1, title="Ü", url="http://u")))
    assert buf.getvalue() == "#EXTM3U\n#EXTINF:1,Ü\nhttp://u\n"


def test_write_encodes_with_configured_encoding(monkeypatch):
    monkeypatch.setattr(writer.config, "ENCODING", "latin-1")
    out = writer.dumps(_playlist(Record(title="Café", url="c")))
    assert out == "#EXTM3U\n#EXTINF:0,Café\nc\n".encode("latin-1")


def test_write_utf16_emits_single_bom(monkeypatch):
    monkeypatch.setattr(writer.config, "ENCODING", "utf-16")
    p = _playlist(Record(duration=1, title="A", url="u"))
    out = writer.dumps(p)
    assert out == "#EXTM3U\n#EXTINF:1,A\nu\n".encode("utf-16")
    assert out.count(codecs.BOM_UTF16) == 1


def test_write_propagates_stream_errors_and_keeps_partial_output():
    class FailingSink:
        def __init__(self, fail_after):
            self.chunks = []
            self.fail_after = fail_after

        def write(self, data):
            if len(self.chunks) == self.fail_after:
                raise OSError("no space left")
            self.chunks.append(data)
            return len(data)

    sink = FailingSink(fail_after=2)
    p = _playlist(Record(title="A", url="a"), Record(title="B", url="b"))
    with pytest.raises(OSError, match="no space left"):
        writer.write(sink, p)
    assert sink.chunks == [b"#EXTM3U\n", b"#EXTINF:0,A\n"]
