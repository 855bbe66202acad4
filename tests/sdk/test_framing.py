"""Unit tests for the SSE frame assembler."""

import pytest

from coze_workflow_sdk.workflow_client.framing import (
    FrameAssembler,
    aiter_frames,
    iter_frames,
)

from tests.sdk.frames import HELLO_FRAME, INTERRUPT_FRAME, WORLD_FRAME

STREAM = HELLO_FRAME + WORLD_FRAME + INTERRUPT_FRAME


def _by_lines(text: str) -> list[str]:
    return text.splitlines(keepends=True)


@pytest.mark.parametrize(
    "chunker",
    [
        pytest.param(list, id="per-character"),
        pytest.param(_by_lines, id="per-line"),
        pytest.param(lambda text: [text], id="all-at-once"),
        pytest.param(
            lambda text: [text[i : i + 7] for i in range(0, len(text), 7)],
            id="fixed-size",
        ),
    ],
)
def test_frames_identical_regardless_of_chunking(chunker):
    """Chunk boundaries must not change the assembled frames."""
    expected = [
        HELLO_FRAME.rstrip("\n"),
        WORLD_FRAME.rstrip("\n"),
        INTERRUPT_FRAME.rstrip("\n"),
    ]

    assert list(iter_frames(chunker(STREAM))) == expected


def test_feed_returns_only_completed_frames():
    assembler = FrameAssembler()

    assert assembler.feed("id: 1\nevent: Message\n") == []
    assert assembler.feed("data: {}\n") == []
    assert assembler.feed("\n") == ["id: 1\nevent: Message\ndata: {}"]


def test_empty_stream_yields_no_frames():
    assert list(iter_frames([])) == []
    assert list(iter_frames([""])) == []


def test_consecutive_blank_lines_do_not_yield_empty_frames():
    frames = list(iter_frames(["\n\n\n", "id: 1\n\n\n\n\n", "\n", "id: 2\n\n"]))

    assert frames == ["id: 1", "id: 2"]


def test_trailing_frame_without_blank_line_is_flushed_at_eof():
    frames = list(iter_frames([HELLO_FRAME, "id: 2\nevent: Message\ndata: {}"]))

    assert frames == [HELLO_FRAME.rstrip("\n"), "id: 2\nevent: Message\ndata: {}"]


def test_flush_ignores_whitespace_residue():
    assembler = FrameAssembler()
    assembler.feed(HELLO_FRAME)
    assembler.feed("   ")

    assert assembler.flush() is None


def test_crlf_line_endings_are_accepted():
    text = "id: 1\r\nevent: Message\r\ndata: {}\r\n\r\nid: 2\r\n\r\n"

    assert list(iter_frames(list(text))) == [
        "id: 1\nevent: Message\ndata: {}",
        "id: 2",
    ]


@pytest.mark.asyncio
async def test_async_frames_match_sync_frames():
    async def chunks():
        for char in STREAM:
            yield char

    frames = [frame async for frame in aiter_frames(chunks())]

    assert frames == list(iter_frames([STREAM]))
