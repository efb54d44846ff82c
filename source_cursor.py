"""Read cursor over a loaded source document.

`SourceCursor` owns the full program text and a forward-only offset into it.
The lexer uses it for single-character lookahead and consumption; all reads
are relative to the current offset and none of the methods raise. Reads past
the end of the document return `None` (single characters) or `""` (strings).
"""

from __future__ import annotations
from typing import Optional


class SourceCursor:
    def __init__(self, text: str):
        self.document = text
        self.index = 0

    def peek_string(self, length: int) -> str:
        """Return the next `length` characters without consuming them.

        Returns an empty string unless the window ends strictly before the
        last character of the document, so a window touching the final
        character is reported as unavailable.
        """
        if self.index + length >= len(self.document):
            return ""
        return self.document[self.index : self.index + length]

    def swallow(self, length: int) -> None:
        """Skip `length` characters, stopping at the end of the document."""
        self.index = min(self.index + length, len(self.document))

    def remainder(self) -> str:
        if self.is_done():
            return ""
        return self.document[self.index :]

    def peek(self, offset: int = 0) -> Optional[str]:
        """Look at the character `offset` places ahead without consuming it."""
        pos = self.index + offset
        if 0 <= pos < len(self.document):
            return self.document[pos]
        return None

    def get_char(self) -> Optional[str]:
        """Consume and return the current character."""
        if self.index >= len(self.document):
            return None
        ch = self.document[self.index]
        self.index += 1
        return ch

    def is_done(self) -> bool:
        return self.index >= len(self.document)
