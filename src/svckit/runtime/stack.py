"""Call-stack capture as compact, serializable frames.

Example:
    >>> from svckit.runtime import caller
    >>> def handler():
    ...     return caller()
    >>> str(handler())  # doctest: +SKIP
    'myapp/views.py:handler:2'
"""

from __future__ import annotations

import sys
from types import FrameType

from pydantic import BaseModel, ConfigDict, Field

MAX_DEPTH = 64

_TRIM_MARKERS: tuple[str, ...] = ("/site-packages/", "/dist-packages/", "/src/")


def trim_pkg_file(path: str) -> str:
    """Strip the install prefix from a source path.

    Everything up to and including the first marker found is removed,
    markers being tried in order. Paths with no marker are returned as-is.
    """
    normalized = path.replace("\\", "/")
    for mark in _TRIM_MARKERS:
        if (index := normalized.find(mark)) > -1:
            return normalized[index + len(mark):]
    return path


class Frame(BaseModel):
    """A single call-site: file, qualified function name and line."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    file: str = ""
    func: str = ""
    line: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.func:
            parts.append(self.func.rsplit(".", 1)[-1])
        if self.line > 0:
            parts.append(str(self.line))
        return ":".join(parts)

    def to_json(self) -> str:
        """Serialize, omitting empty fields."""
        return self.model_dump_json(exclude_defaults=True)

    @classmethod
    def from_frame(cls, frame: FrameType) -> Frame:
        code = frame.f_code
        module = frame.f_globals.get("__name__", "")
        func = f"{module}.{code.co_qualname}" if module else code.co_qualname
        return cls(file=trim_pkg_file(code.co_filename), func=func, line=frame.f_lineno)


_UNKNOWN = Frame(file="???")


def _frame_at(skip: int) -> FrameType | None:
    # +2: this helper and the public function calling it
    frame: FrameType | None = sys._getframe(2)
    for _ in range(skip):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def caller(skip: int = 0) -> Frame:
    """Return the frame of the function calling ``caller``.

    Each increment of ``skip`` moves one frame further out. Returns
    ``Frame(file="???")`` when the stack is not that deep.
    """
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    frame = _frame_at(skip)
    return Frame.from_frame(frame) if frame is not None else _UNKNOWN


def stacks(skip: int = 0) -> list[Frame]:
    """Return up to MAX_DEPTH frames, innermost first, starting like ``caller``."""
    if skip < 0:
        raise ValueError(f"skip must be >= 0, got {skip}")
    frames: list[Frame] = []
    frame = _frame_at(skip)
    while frame is not None and len(frames) < MAX_DEPTH:
        frames.append(Frame.from_frame(frame))
        frame = frame.f_back
    return frames
