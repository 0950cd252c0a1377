# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Classification of a file's leading comment block.

The scanner is a small finite automaton. Its entry state depends on the
comment style and every line moves it through `transition`, which says
where the line belongs (leading block or remainder) and what the next
state is. Once the machine reaches COPYING_REMAINDER it never leaves.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from copyrighter.core.data.comment_style import CommentStyle
from copyrighter.core.data.content_split import ContentSplit

LINE_COMMENT = b"//"
HASH_COMMENT = b"#"
BLOCK_START = b"/*"
BLOCK_END = b"*/"


class ScanState(Enum):
    LOOKING_FOR_BLOCK_START = auto()
    LOOKING_FOR_LINE_COMMENT_CONTINUATION = auto()
    LOOKING_FOR_HASH_CONTINUATION = auto()
    LOOKING_FOR_BLOCK_END = auto()
    COPYING_REMAINDER = auto()


@dataclass(frozen=True)
class Step:
    """Outcome of feeding one line to the scanner."""

    next_state: ScanState
    in_leading_block: bool


def _continuation_state(style: CommentStyle) -> ScanState:
    if style is CommentStyle.MULTI:
        return ScanState.LOOKING_FOR_BLOCK_END
    if style is CommentStyle.HASH:
        return ScanState.LOOKING_FOR_HASH_CONTINUATION
    return ScanState.LOOKING_FOR_LINE_COMMENT_CONTINUATION


def _opens_block(style: CommentStyle, line: bytes) -> bool:
    if style is CommentStyle.MULTI:
        return line.startswith(BLOCK_START)
    if style is CommentStyle.HASH:
        return line.startswith(HASH_COMMENT)
    return line.startswith(LINE_COMMENT)


def _closes_block(line: bytes) -> bool:
    return line.strip().endswith(BLOCK_END)


def transition(state: ScanState, style: CommentStyle, line: bytes) -> Step:
    """
    Advance the scanner by one line.

    Args:
        state: Current state
        style: Comment style of the run, consulted only at block start
        line: The line without its trailing newline

    Returns:
        The next state and whether the line belongs to the leading block
    """
    match state:
        case ScanState.LOOKING_FOR_BLOCK_START:
            if not _opens_block(style, line):
                return Step(ScanState.COPYING_REMAINDER, False)
            next_state = _continuation_state(style)
            if next_state is ScanState.LOOKING_FOR_BLOCK_END and _closes_block(line):
                next_state = ScanState.COPYING_REMAINDER
            return Step(next_state, True)

        case ScanState.LOOKING_FOR_LINE_COMMENT_CONTINUATION:
            if line.startswith(LINE_COMMENT):
                return Step(state, True)
            return Step(ScanState.COPYING_REMAINDER, False)

        case ScanState.LOOKING_FOR_HASH_CONTINUATION:
            if line.startswith(HASH_COMMENT):
                return Step(state, True)
            return Step(ScanState.COPYING_REMAINDER, False)

        case ScanState.LOOKING_FOR_BLOCK_END:
            if _closes_block(line):
                return Step(ScanState.COPYING_REMAINDER, True)
            return Step(state, True)

        case _:
            return Step(ScanState.COPYING_REMAINDER, False)


def split_lines(content: bytes) -> list[bytes]:
    """Split raw file content on newlines, without a phantom last line."""
    if not content:
        return []
    lines = content.split(b"\n")
    if content.endswith(b"\n"):
        lines.pop()
    return lines


def scan_lines(lines: Iterable[bytes], style: CommentStyle | str) -> ContentSplit:
    """
    Partition lines into the leading comment block and the remainder.

    Every line is re-emitted with a newline appended, in its original order.
    """
    style = CommentStyle(style)
    state = ScanState.LOOKING_FOR_BLOCK_START
    leading: list[bytes] = []
    remainder: list[bytes] = []

    for line in lines:
        if state is ScanState.COPYING_REMAINDER:
            remainder.append(line)
            continue
        step = transition(state, style, line)
        (leading if step.in_leading_block else remainder).append(line)
        state = step.next_state

    return ContentSplit(
        leading_block=b"".join(line + b"\n" for line in leading),
        remainder=b"".join(line + b"\n" for line in remainder),
    )


def scan_content(content: bytes, style: CommentStyle | str) -> ContentSplit:
    """Partition raw file content, see `scan_lines`."""
    return scan_lines(split_lines(content), style)
