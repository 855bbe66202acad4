"""Split a server-sent event body into blank-line delimited frames."""

from __future__ import annotations

from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, List, Optional


class FrameAssembler:
    """Incrementally assemble frames from arbitrarily chunked text.

    Chunks may be single characters, whole lines or the entire body; the
    frames produced are the same either way. Frames are returned without
    their terminating blank line, with lines joined by ``\\n``.
    """

    def __init__(self) -> None:
        self._line: List[str] = []
        self._lines: List[str] = []

    def feed(self, text: str) -> List[str]:
        """Consume ``text`` and return every frame it completes."""

        frames: List[str] = []
        start = 0
        while True:
            newline = text.find("\n", start)
            if newline == -1:
                if start < len(text):
                    self._line.append(text[start:])
                return frames
            self._line.append(text[start:newline])
            line = "".join(self._line).rstrip("\r")
            self._line.clear()
            start = newline + 1

            if line:
                self._lines.append(line)
                continue
            frame = self._take_frame()
            if frame is not None:
                frames.append(frame)

    def flush(self) -> Optional[str]:
        """Return residual content as a final frame at end of stream."""

        if self._line:
            self._lines.append("".join(self._line).rstrip("\r"))
            self._line.clear()
        return self._take_frame()

    def _take_frame(self) -> Optional[str]:
        lines, self._lines = self._lines, []
        # Whitespace-only residue never becomes a frame.
        if not any(line.strip() for line in lines):
            return None
        return "\n".join(lines)


def iter_frames(chunks: Iterable[str]) -> Iterator[str]:
    """Yield frames from a synchronous chunk source, flushing at EOF."""

    assembler = FrameAssembler()
    for chunk in chunks:
        yield from assembler.feed(chunk)
    tail = assembler.flush()
    if tail is not None:
        yield tail


async def aiter_frames(chunks: AsyncIterable[str]) -> AsyncIterator[str]:
    """Yield frames from an asynchronous chunk source, flushing at EOF."""

    assembler = FrameAssembler()
    async for chunk in chunks:
        for frame in assembler.feed(chunk):
            yield frame
    tail = assembler.flush()
    if tail is not None:
        yield tail
