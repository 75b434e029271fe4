"""Byte-level line helpers used by the injector."""

from __future__ import annotations

from syscallguard.constants import LINE_TERMINATOR


def leading_indent(line: bytes) -> bytes:
    """Return the leading run of spaces and tabs in ``line``.

    A line made only of whitespace has no indentation to copy.
    """
    for i, byte in enumerate(line):
        if byte not in (0x20, 0x09):
            return line[:i]
    return b""


def insert_line(lines: list[bytes], index: int, new_line: bytes) -> None:
    """Insert ``new_line`` at ``index``, shifting later lines down.

    Mutates ``lines`` in place. ``index`` may equal ``len(lines)``.
    """
    if index < 0 or index > len(lines):
        raise IndexError(f"line index {index} out of range")
    lines.insert(index, new_line)


def split_lines(content: bytes) -> list[bytes]:
    """Split on the line terminator, keeping a trailing empty segment.

    ``join_lines(split_lines(b))`` is always ``b``.
    """
    return content.split(LINE_TERMINATOR)


def join_lines(lines: list[bytes]) -> bytes:
    return LINE_TERMINATOR.join(lines)
