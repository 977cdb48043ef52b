"""Whitespace-separated token input and multi-case driving."""

from __future__ import annotations

from collections.abc import Callable


class StopRun(Exception):
    """Raised by a case handler to end the whole run early.

    ``output``, when given, is written out before the run ends.
    """

    def __init__(self, output: str | None = None) -> None:
        super().__init__(output)
        self.output = output


class TokenReader:
    """Hands out whitespace-separated tokens of a text one at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        """Return the next token; raise EOFError when none is left."""
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("unexpected end of input") from None

    def integer(self) -> int:
        """Return the next token as an integer."""
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        """Return the next ``count`` tokens as integers."""
        return [self.integer() for _ in range(count)]


def run_cases(text: str, handler: Callable[[TokenReader], str]) -> str:
    """Read a case count, then call ``handler`` once per case.

    Each handler result is written as one block ending in a newline.
    A handler may raise StopRun to end the run after its own output.
    """
    reader = TokenReader(text)
    count = reader.integer()
    blocks: list[str] = []
    for _ in range(count):
        try:
            blocks.append(handler(reader))
        except StopRun as stop:
            if stop.output is not None:
                blocks.append(stop.output)
            break
    return "".join(f"{block}\n" for block in blocks)