"""Console adapter for prompting and printing."""

from __future__ import annotations

import sys
from typing import Callable, TextIO


class Console:
    """Line-oriented terminal I/O; input and output streams are injectable."""

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func or input
        self._output = output or sys.stdout

    def prompt(self, text: str) -> str:
        """Show `text` and return the reply; raises EOFError when input is exhausted."""
        return self._input(text)

    def show(self, text: str = "") -> None:
        self._output.write(text + "\n")
        self._output.flush()


__all__ = ["Console"]
