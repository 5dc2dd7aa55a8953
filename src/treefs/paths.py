"""Immutable POSIX path values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

__all__ = ["PosixPath"]

SEPARATOR = "/"


def _normalize(segments: list[str], absolute: bool) -> tuple[str, ...]:
    """Collapse '.', '..' and empty segments."""
    result: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if result and result[-1] != "..":
                result.pop()
            elif not absolute:
                result.append(segment)
            continue
        result.append(segment)
    return tuple(result)


class PosixPath(BaseModel):
    """A normalized POSIX filesystem location.

    Paths are values: every operation that "changes" a path returns a new
    one. Two paths are equal iff their normalized string forms are equal.
    """

    model_config = ConfigDict(frozen=True)

    absolute: bool = False
    segments: tuple[str, ...] = ()

    @classmethod
    def from_string(cls, text: str) -> PosixPath:
        """Parse a POSIX path string.

        Args:
            text: Path string, absolute or relative.

        Returns:
            The normalized path.
        """
        absolute = text.startswith(SEPARATOR)
        return cls(absolute=absolute, segments=_normalize(text.split(SEPARATOR), absolute))

    def add(self, segment: str) -> PosixPath:
        """Return a new path with a relative path string appended.

        An absolute argument replaces the receiver entirely.
        """
        if segment.startswith(SEPARATOR):
            return PosixPath.from_string(segment)
        combined = list(self.segments) + segment.split(SEPARATOR)
        return PosixPath(absolute=self.absolute, segments=_normalize(combined, self.absolute))

    def is_absolute(self) -> bool:
        return self.absolute

    @property
    def name(self) -> str:
        """Final segment, or an empty string for the root and for '.'."""
        return self.segments[-1] if self.segments else ""

    @property
    def parent(self) -> PosixPath:
        if not self.segments or self.segments[-1] == "..":
            return self.add("..")
        return PosixPath(absolute=self.absolute, segments=self.segments[:-1])

    def to_string(self) -> str:
        body = SEPARATOR.join(self.segments)
        if self.absolute:
            return SEPARATOR + body
        return body or "."

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PosixPath({self.to_string()!r})"

    def __fspath__(self) -> str:
        return self.to_string()
