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

from dataclasses import dataclass, field

from pydantic import ConfigDict

from copyrighter.constants import DEFAULT_EXTENSIONS
from copyrighter.core.data.comment_style import CommentStyle


@dataclass
class GlobalConfig:
    template: str | None = None
    extensions: str = DEFAULT_EXTENSIONS
    style: str = CommentStyle.SINGLE.value
    years: str | None = None
    authors: str | None = None
    quiet: bool = False
    debug: bool = False
    on_error: str = "abort"

    # TOML values such as `years = 2025` arrive as numbers
    __pydantic_config__ = ConfigDict(coerce_numbers_to_str=True)

    descriptions = {
        "template": "The template to use for the copyright header. All occurrences of $YEAR$ are replaced with the year(s) and $AUTHOR$ with the author(s). A built-in template is used if not given",
        "extensions": "A comma-separated list of file extensions to process",
        "style": "The style of comment to use for the copyright header. Choices are 'single' for // ... comments, 'multi' for /* ... */ comments, and 'hash' for # ... comments",
        "years": "The year(s) to use in the copyright notice, defaults to the current year",
        "authors": "The author(s) to use in the copyright notice, defaults to your display name",
        "quiet": "Suppress progress messages",
        "debug": "Enable debugging output",
        "on_error": "What to do when a file cannot be rewritten: 'abort' the run or 'continue' and report at the end",
    }


@dataclass(frozen=True)
class StampContext:
    """Fully resolved, immutable configuration for one run."""

    header: str
    style: CommentStyle
    extensions: frozenset[str]
    targets: tuple[str, ...]
    quiet: bool = False
    on_error: str = "abort"

    @property
    def continue_on_error(self) -> bool:
        return self.on_error == "continue"


@dataclass
class StampResult:
    updated: list[str] = field(default_factory=list)
    failed: list[tuple[str, Exception]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.updated) + len(self.failed)

    @property
    def success(self) -> bool:
        return not self.failed
