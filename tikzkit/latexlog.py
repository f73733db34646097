"""Extraction of the relevant error messages from a LaTeX log."""

from __future__ import annotations

import re

_ERROR_PATTERN = re.compile(r"(\S*):(\d+): (.*)$")
_LINE_REFERENCE = re.compile(r"^l\.(\d+)(.*)")

# The first entry is only ever reported through the file:line:message form.
_ERROR_MESSAGES = (
    "Undefined control sequence",
    "LaTeX Warning:",
    "LaTeX Error:",
    "Runaway argument?",
    "Missing character:",
    "Error:",
)

# Number of lines the generated LaTeX document places before the TikZ code.
_LINE_OFFSET = 7


class _LineReader:
    """Reads a log line by line; reading past the end yields empty lines."""

    def __init__(self, text: str) -> None:
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        self._lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def read(self) -> str:
        if self.at_end():
            return ""
        line = self._lines[self._pos]
        self._pos += 1
        return line


def parse_log_text(text: str) -> str:
    """Return the error and warning messages found in the LaTeX log ``text``.

    Errors of the form ``file:line: message`` are reported with the lines up
    to the ``l.<number>`` context line, whose number is shifted so that it
    refers to the TikZ code rather than to the generated document.
    """
    reader = _LineReader(text)
    parts: list[str] = []

    while not reader.at_end():
        line = reader.read()
        error = _ERROR_PATTERN.search(line)
        if error:
            line_num = str(int(error.group(2)))
            parts.append(f"[LaTeX] Line {line_num}: {error.group(3)}")

            line = reader.read()
            reference = _LINE_REFERENCE.match(line)
            while reference is None and not reader.at_end():
                if not line:
                    parts.append(f"\n[LaTeX] Line {line_num}: ")
                if not line.startswith("Type"):
                    parts.append(line)
                line = reader.read()
                reference = _LINE_REFERENCE.match(line)
            parts.append("\n")
            if reader.at_end():
                break

            shifted = int(reference.group(1)) - _LINE_OFFSET if reference else -_LINE_OFFSET
            rest = reference.group(2) if reference else ""
            parts.append(f"l.{shifted}{rest}\n")
            parts.append(reader.read() + "\n")
        else:
            if any(message in line for message in _ERROR_MESSAGES[1:]):
                parts.append(line + "\n")
                parts.append(reader.read() + "\n")
                parts.append(reader.read() + "\n")

    return "".join(parts)