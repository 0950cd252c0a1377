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

from copyrighter.constants import AUTHOR_TOKEN, YEAR_TOKEN
from copyrighter.core.data.comment_style import CommentStyle

LINE_PREFIXES = {
    CommentStyle.SINGLE: "//",
    CommentStyle.MULTI: " *",
    CommentStyle.HASH: "#",
}

BLOCK_OPEN = "/*\n"
BLOCK_CLOSE = " */\n"


def substitute(template: str, years: str, authors: str | None = None) -> str:
    """Replace every year placeholder (and author placeholder, if given)."""
    text = template.replace(YEAR_TOKEN, years)
    if authors is not None:
        text = text.replace(AUTHOR_TOKEN, authors)
    return text


def split_template_lines(text: str) -> list[str]:
    """
    Split template text into lines.

    A trailing newline does not produce an extra empty line and a trailing
    carriage return is dropped from each line, so templates saved with
    Windows line endings render the same as Unix ones.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def render_header(
    template: str,
    style: CommentStyle | str,
    years: str,
    authors: str | None = None,
) -> str:
    """
    Render the literal header text written at the top of every file.

    Args:
        template: Header body, may contain $YEAR$ and $AUTHOR$ placeholders
        style: Comment style used to wrap each line
        years: Free-form text substituted for $YEAR$
        authors: Free-form text substituted for $AUTHOR$, left alone if None

    Returns:
        The rendered header, always ending with a newline
    """
    style = CommentStyle(style)
    prefix = LINE_PREFIXES[style]

    parts = []
    if style is CommentStyle.MULTI:
        parts.append(BLOCK_OPEN)

    for line in split_template_lines(substitute(template, years, authors)):
        if line:
            parts.append(f"{prefix} {line}\n")
        else:
            parts.append(f"{prefix}\n")

    if style is CommentStyle.MULTI:
        parts.append(BLOCK_CLOSE)

    return "".join(parts)
