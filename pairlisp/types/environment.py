"""Runtime environment for pairlisp.

The Environment is a stack of frames, each a dict from symbol name to value.
Lookup walks from the innermost frame outwards; define always writes into
the innermost frame. Entering a closure call installs a new chain (the
closure's captured chain, or the caller's, plus one fresh frame) and leaving
it restores the chain that was active before.

Frames are shared by reference, so a closure that captured the global frame
sees globals defined after it was created.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from pairlisp import LispValue
from pairlisp.errors import SymbolNotFoundError
from pairlisp.types.span import Span, NO_SPAN


class Environment:
    """Chain of scopes mapping symbol names to values."""

    __slots__ = ("frames", "_saved")

    def __init__(self):
        self.frames: list[dict[str, LispValue]] = [{}]
        self._saved: list[list[dict[str, LispValue]]] = []

    @property
    def depth(self) -> int:
        """Number of enclose() calls not yet matched by disclose()."""
        return len(self._saved)

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` in the innermost frame, replacing any earlier binding."""
        self.frames[-1][name] = value

    def find(self, name: str) -> Optional[dict[str, LispValue]]:
        """Find the innermost frame that binds `name`."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame
        return None

    def lookup(self, name: str, span: Span = NO_SPAN) -> LispValue:
        """Look up the value bound to `name`.

        Raises SymbolNotFoundError if no frame binds it.
        """
        frame = self.find(name)
        if frame is None:
            raise SymbolNotFoundError(name, span)
        return frame[name]

    def snapshot(self) -> tuple[dict[str, LispValue], ...]:
        """The current chain, for capture by a closure."""
        return tuple(self.frames)

    def enclose(self, captured: Optional[tuple[dict[str, LispValue], ...]] = None) -> None:
        """Push a new empty frame.

        The frame's parent chain is `captured` when given, otherwise the
        current chain.
        """
        self._saved.append(self.frames)
        base = self.frames if captured is None else captured
        self.frames = [*base, {}]

    def disclose(self) -> None:
        """Drop the frame pushed by the matching enclose() and restore the
        chain that was active before it."""
        if not self._saved:
            raise RuntimeError("disclose() called without a matching enclose()")
        self.frames = self._saved.pop()

    def reset(self) -> None:
        """Discard every call frame, keeping the global frame."""
        if self._saved:
            self.frames = self._saved[0]
            self._saved.clear()

    def _write_vars(self, frame: dict[str, LispValue], buffer: StringIO) -> None:
        """Write one frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in frame.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame, with an indicator for enclosing frames."""
        with StringIO() as buffer:
            self._write_vars(self.frames[-1], buffer)
            if len(self.frames) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain, innermost first, for debugging."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for frame in reversed(self.frames):
                frame_buf = StringIO()
                self._write_vars(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
