"""
Fixed-width ASCII tokens as they appear on the wire
"""

from __future__ import annotations


class Token:
    """A fixed-width byte token (class name, instance name, variable code).

    Equality and hashing are byte-exact, padding included, so ``FIELD`` padded
    to 8 bytes never compares equal to ``FIELD`` padded to 4. Use ``text`` or
    ``str()`` for the trimmed display form.
    """

    __slots__ = ("raw",)

    def __init__(self, raw: bytes):
        object.__setattr__(self, "raw", bytes(raw))

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @classmethod
    def pad(cls, text: str, width: int) -> Token:
        """Build the space-padded wire form of ``text``"""
        data = text.encode("ascii")
        if len(data) > width:
            raise ValueError(f"{text!r} does not fit in {width} bytes")
        return cls(data.ljust(width, b" "))

    @property
    def width(self) -> int:
        return len(self.raw)

    @property
    def text(self) -> str:
        return self.raw.decode("ascii", errors="replace").rstrip(" \x00")

    def matches(self, text: str) -> bool:
        """True if ``text`` padded to this token's width equals it"""
        try:
            return self == Token.pad(text, self.width)
        except ValueError:
            return False

    def __eq__(self, other):
        if isinstance(other, Token):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self):
        return hash(self.raw)

    def __reduce__(self):
        return (Token, (self.raw,))

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"Token({self.raw!r})"
