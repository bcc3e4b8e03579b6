"""Reading scenario files: CSV lines, delimited lists and small console helpers."""

from __future__ import annotations

import subprocess
from typing import Iterator, TextIO

_MAX_LINE_LENGTH = 4096
_MAX_FIELDS = 128

CONTINUE_PROMPT = "Presione una tecla para continuar..."


def read_csv_line(stream: TextIO, separator: str = ",") -> list[str] | None:
    """Read one line from ``stream`` and split it into fields.

    Fields may be wrapped in double quotes, in which case they can contain the
    separator, and a doubled quote stands for a literal one. Returns ``None``
    at end of file. A line holds at most 127 fields; lines longer than 4095
    characters are read in pieces.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")

    line = stream.readline(_MAX_LINE_LENGTH - 1)
    if not line:
        return None
    line = line.split("\n", 1)[0].split("\r", 1)[0]

    fields: list[str] = []
    pos = 0
    end = len(line)
    while pos < end and len(fields) < _MAX_FIELDS - 1:
        if line[pos] == '"':
            pos += 1
            chars: list[str] = []
            while pos < end:
                if line.startswith('""', pos):
                    chars.append('"')
                    pos += 2
                elif line[pos] == '"':
                    pos += 1
                    break
                else:
                    chars.append(line[pos])
                    pos += 1
            if pos < end and line[pos] == separator:
                pos += 1
            fields.append("".join(chars))
        else:
            stop = line.find(separator, pos)
            if stop == -1:
                fields.append(line[pos:])
                pos = end
            else:
                fields.append(line[pos:stop])
                pos = stop + 1
    return fields


def read_csv_rows(stream: TextIO, separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of every remaining line of ``stream``."""
    while (fields := read_csv_line(stream, separator)) is not None:
        yield fields


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on any character of ``delim``, dropping empty pieces.

    Runs of delimiters count as one, and spaces around each piece are removed.
    """
    if delim:
        first = delim[0]
        for other in delim[1:]:
            text = text.replace(other, first)
        pieces = [piece for piece in text.split(first) if piece]
    else:
        pieces = [text] if text else []
    return [piece.strip(" ") for piece in pieces]


def clear_screen() -> None:
    """Clear the terminal."""
    subprocess.run("clear", shell=True, check=False)


def press_to_continue() -> None:
    """Show a prompt and wait for the user to press Enter."""
    print(CONTINUE_PROMPT)
    input()