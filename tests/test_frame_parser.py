"""Frame parser tests: chunking, terminal flush, malformed lines."""

import logging

import pytest

from prompt_edit.common.models import ContentFrame, DoneFrame, ErrorFrame
from prompt_edit.core.protocol import FrameParser, MalformedFrame, decode_frames

RESPONSE = (
    '{"content":"Hello"}\n'
    '{"content":" wörld ✓"}\n'
    "\n"
    '{"error":"careful"}\n'
    '{"done":true}\n'
)
EXPECTED = [
    ContentFrame(text="Hello"),
    ContentFrame(text=" wörld ✓"),
    ErrorFrame(text="careful"),
    DoneFrame(),
]


def parse_all(chunks):
    parser = FrameParser()
    frames = []
    for chunk in chunks:
        frames.extend(parser.feed(chunk))
    frames.extend(parser.flush())
    return frames


def test_single_chunk():
    assert parse_all([RESPONSE]) == EXPECTED


def test_every_two_way_byte_split_matches_unsplit():
    data = RESPONSE.encode("utf-8")
    for i in range(len(data) + 1):
        assert parse_all([data[:i], data[i:]]) == EXPECTED, f"split at byte {i}"


def test_one_byte_at_a_time():
    data = RESPONSE.encode("utf-8")
    assert parse_all([data[i:i + 1] for i in range(len(data))]) == EXPECTED


def test_every_two_way_text_split_matches_unsplit():
    for i in range(len(RESPONSE) + 1):
        assert parse_all([RESPONSE[:i], RESPONSE[i:]]) == EXPECTED


def test_final_frame_without_newline_is_flushed():
    parser = FrameParser()
    frames = list(parser.feed('{"content":"a"}\n{"content":"b"}'))
    assert frames == [ContentFrame(text="a")]
    assert parser.pending == '{"content":"b"}'
    assert list(parser.flush()) == [ContentFrame(text="b")]
    assert parser.pending == ""


def test_flush_ignores_whitespace_tail():
    parser = FrameParser()
    list(parser.feed('{"content":"a"}\n   '))
    assert list(parser.flush()) == []


def test_chunk_ending_on_boundary_leaves_empty_tail():
    parser = FrameParser()
    list(parser.feed('{"content":"a"}\n'))
    assert parser.pending == ""


def test_tail_is_kept_even_if_frames_are_not_iterated():
    parser = FrameParser()
    parser.feed('{"content":"a"}\n{"cont')
    assert parser.pending == '{"cont'


def test_crlf_line_endings():
    assert parse_all(['{"content":"a"}\r\n{"content":"b"}\r\n']) == [
        ContentFrame(text="a"),
        ContentFrame(text="b"),
    ]


def test_malformed_line_does_not_stop_later_lines(caplog):
    with caplog.at_level(logging.WARNING):
        frames = parse_all(['{"content":"a"}\nnot json\n[1, 2]\n{"content":3}\n{"content":"b"}\n'])
    assert frames == [ContentFrame(text="a"), ContentFrame(text="b")]
    assert "malformed" in caplog.text


def test_object_with_error_and_content_yields_both():
    assert decode_frames('{"content":"x","error":"y"}') == [
        ErrorFrame(text="y"),
        ContentFrame(text="x"),
    ]


@pytest.mark.parametrize("line", ['{"foo":1}', '"text"', '{"done":false}', "{"])
def test_decode_rejects_unknown_shapes(line):
    with pytest.raises(MalformedFrame):
        decode_frames(line)
