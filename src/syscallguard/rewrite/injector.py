"""Insert panic guards above guard sites in a line buffer."""

from __future__ import annotations

import logging

import tree_sitter

from syscallguard.config import (
    FALLBACK_CALL_TEXT,
    GUARD_CALL,
    GUARD_MARKER,
    GUARD_MESSAGE_PREFIX,
)
from syscallguard.rewrite.schemas import GuardSite, InjectionResult
from syscallguard.text import insert_line, leading_indent

logger = logging.getLogger(__name__)

# Characters that cannot appear raw inside a Go interpreted string literal.
_GO_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
}


def inject_guards(
    sites: list[GuardSite],
    content: bytes,
    lines: list[bytes],
) -> InjectionResult:
    """Insert one guard line above each site's statement.

    ``sites`` must be in ascending source order: each insertion shifts
    every later line down by one, and ``offset`` tracks that drift so a
    site's original line number still lands on the right buffer index.
    ``lines`` is copied, not mutated.

    A site is skipped when its index falls outside the buffer or when the
    line directly above already carries the guard marker (re-runs).
    """
    buffer = list(lines)
    offset = 0
    skipped = 0

    for site in sites:
        index = site.position.line - 1 + offset

        if index < 0 or index >= len(buffer):
            logger.debug(
                "event=site_skipped reason=out_of_range line=%d",
                site.position.line,
            )
            skipped += 1
            continue

        if index > 0 and GUARD_MARKER in buffer[index - 1]:
            logger.debug(
                "event=site_skipped reason=already_guarded line=%d",
                site.position.line,
            )
            skipped += 1
            continue

        indent = leading_indent(buffer[index])
        call_text = extract_call_text(site.call, content)
        insert_line(buffer, index, indent + guard_statement(call_text))
        offset += 1

    return InjectionResult(lines=buffer, inserted=offset, skipped=skipped)


def extract_call_text(call: tree_sitter.Node, content: bytes) -> str:
    """Slice the call's exact source text out of the original bytes."""
    start, end = call.start_byte, call.end_byte
    if 0 <= start < end <= len(content):
        return content[start:end].decode("utf-8", errors="replace")
    return FALLBACK_CALL_TEXT


def guard_statement(call_text: str) -> bytes:
    """Build ``panic("<prefix>: <call text>")`` without indentation.

    The call text is escaped only where a Go string literal requires it,
    so the panic message reads back as the original text.
    """
    escaped = "".join(_GO_STRING_ESCAPES.get(ch, ch) for ch in call_text)
    return f'{GUARD_CALL}("{GUARD_MESSAGE_PREFIX}: {escaped}")'.encode()
