#!/usr/bin/env python3
"""
Base64 Encoder/Decoder - Line Prefixer

Inserts a fixed prefix at the start of every line of a text or byte stream.
Used to indent the example block in the help text.

Two wrappers share one state machine:
    PrefixReader  pulls from a readable object (``read``)
    PrefixWriter  pushes into a writable object (``write``)

The prefix is emitted lazily, right before the first unit of each line, so an
empty stream produces no output and a trailing newline is never followed by a
dangling prefix:

    >>> prefix_text("a\\n\\nb", ">")
    '>a\\n>\\n>b'
    >>> prefix_text("a\\n", ">")
    '>a\\n'

Errors raised by the wrapped stream propagate unchanged.
"""

from typing import AnyStr, Generic, Iterable, Iterator, Union


class _LineState(Generic[AnyStr]):
    """Prefix-pending flag plus the chunk transform that drives it."""

    def __init__(self, prefix: AnyStr):
        if isinstance(prefix, (bytes, bytearray)):
            prefix = bytes(prefix)
            self.newline = b"\n"
        else:
            self.newline = "\n"
        self.prefix = prefix
        self.empty = prefix[:0]
        # True until the first unit, and again after every newline.
        self.pending = True

    def transform(self, chunk: AnyStr):
        """Return ``(output, pending)`` for ``chunk`` without changing state."""
        if not isinstance(chunk, (str, bytes, bytearray)):
            # memoryview and other buffer objects
            chunk = bytes(chunk)
        pending = self.pending
        pieces = []
        start = 0
        end_of_chunk = len(chunk)
        while start < end_of_chunk:
            if pending:
                pieces.append(self.prefix)
                pending = False
            newline_at = chunk.find(self.newline, start)
            if newline_at == -1:
                pieces.append(chunk[start:])
                break
            pieces.append(chunk[start:newline_at + 1])
            start = newline_at + 1
            pending = True
        return self.empty.join(pieces), pending

    def feed(self, chunk: AnyStr) -> AnyStr:
        output, self.pending = self.transform(chunk)
        return output


class PrefixReader(Generic[AnyStr]):
    """Readable wrapper that prefixes every line read from ``inner``.

    ``inner`` only needs a ``read(size)`` method returning ``str`` or
    ``bytes`` of the same type as ``prefix``. Use ``prefix_lines`` to build
    one.
    """

    def __init__(self, inner, prefix: AnyStr):
        self._inner = inner
        self._state = _LineState(prefix)
        self._buffer = self._state.empty

    @property
    def prefix(self) -> AnyStr:
        return self._state.prefix

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> AnyStr:
        """Read up to ``size`` units of prefixed output; all of it if negative."""
        if size is None or size < 0:
            chunk = self._inner.read()
            if chunk:
                self._buffer += self._state.feed(chunk)
            data, self._buffer = self._buffer, self._state.empty
            return data

        while len(self._buffer) < size:
            chunk = self._inner.read(size - len(self._buffer))
            if not chunk:
                break
            self._buffer += self._state.feed(chunk)

        data, self._buffer = self._buffer[:size], self._buffer[size:]
        return data

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            data = self.read(8192)
            if not data:
                return
            yield data


class PrefixWriter(Generic[AnyStr]):
    """Writable wrapper that prefixes every line written through it."""

    def __init__(self, inner, prefix: AnyStr):
        self._inner = inner
        self._state = _LineState(prefix)

    @property
    def prefix(self) -> AnyStr:
        return self._state.prefix

    def writable(self) -> bool:
        return True

    def write(self, data: AnyStr) -> int:
        """Write ``data`` with prefixes inserted; returns ``len(data)``.

        The line state only advances once ``inner.write`` has returned.
        """
        if data:
            output, pending = self._state.transform(data)
            self._inner.write(output)
            self._state.pending = pending
        return len(data)

    def flush(self) -> None:
        self._inner.flush()


def prefix_lines(inner, prefix: AnyStr) -> PrefixReader:
    """Wrap a readable object so every line it yields starts with ``prefix``."""
    return PrefixReader(inner, prefix)


def iter_prefixed(chunks: Iterable[AnyStr], prefix: AnyStr) -> Iterator[AnyStr]:
    """Prefix lines across an iterable of chunks, skipping empty results."""
    state = _LineState(prefix)
    for chunk in chunks:
        out = state.feed(chunk)
        if out:
            yield out


def prefix_text(text: AnyStr, prefix: Union[str, bytes]) -> AnyStr:
    """Return ``text`` with ``prefix`` inserted before every line."""
    return _LineState(prefix).feed(text)
