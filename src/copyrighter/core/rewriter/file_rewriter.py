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

from pathlib import Path

from loguru import logger

from copyrighter.core.data.comment_style import CommentStyle
from copyrighter.core.data.content_split import ContentSplit
from copyrighter.core.exceptions import file_operation_failed
from copyrighter.core.rewriter.comment_scanner import scan_lines


class FileRewriter:
    """Replaces the leading comment block of a file with a rendered header."""

    def __init__(self, style: CommentStyle | str, header: str, quiet: bool = False):
        self.style = CommentStyle(style)
        self.header = header.encode("utf-8")
        self.quiet = quiet

    def read(self, path: Path | str) -> ContentSplit:
        """
        Read a file line by line and split off its leading comment block.

        Raises:
            FileSystemError: if the file cannot be opened or read
        """
        try:
            with open(path, "rb") as f:
                return scan_lines(
                    (line.removesuffix(b"\n") for line in f), self.style
                )
        except OSError as e:
            raise file_operation_failed("read", path, e) from e

    def compose(self, split: ContentSplit) -> bytes:
        """Build the new file content from the header and what is retained."""
        retained = split.retained()
        if retained and not retained.startswith(b"\n"):
            return self.header + b"\n" + retained
        return self.header + retained

    def rewrite(self, path: Path | str) -> None:
        """
        Rewrite a single file in place.

        The file is truncated before the new content is written, so a failure
        mid-write can lose the original content.

        Raises:
            FileSystemError: if the file cannot be read or written
        """
        split = self.read(path)

        if split.is_copyright_block():
            logger.debug(f"Replacing existing copyright block in {path}")
        elif split.has_leading_block():
            logger.debug(f"Keeping non-copyright leading comment in {path}")

        content = self.compose(split)
        try:
            with open(path, "wb") as out:
                out.write(content)
        except OSError as e:
            raise file_operation_failed("write", path, e) from e

        if not self.quiet:
            logger.info(f"Updated {path}")
