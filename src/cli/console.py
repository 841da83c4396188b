"""Terminal adapter for PromptStream: prompts without newline, messages with."""

from typing import TextIO


class Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout

    def prompt(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def say(self, text: str) -> None:
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def read_line(self) -> str:
        line = self._stdin.readline()
        if line == "":
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")
