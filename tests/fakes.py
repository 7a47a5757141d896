# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class ScriptedConsole:
    """
    Deterministic stand-in for input()/print() used by console tests.

    - read() pops the next scripted line, raises EOFError when exhausted
    - write() captures everything printed
    - prompts are recorded for assertions
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    def ask(self, prompt: str) -> str:
        return self.read(prompt).strip()

    @property
    def text(self) -> str:
        return "\n".join(self.output)
