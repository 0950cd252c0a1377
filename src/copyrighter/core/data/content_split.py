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

from dataclasses import dataclass

from copyrighter.constants import COPYRIGHT_MARKER


@dataclass(frozen=True)
class ContentSplit:
    """A file's content partitioned around its leading comment block."""

    leading_block: bytes
    remainder: bytes

    def has_leading_block(self) -> bool:
        return len(self.leading_block) > 0

    def is_copyright_block(self) -> bool:
        # case sensitive on purpose: "COPYRIGHT" does not count
        return self.has_leading_block() and COPYRIGHT_MARKER in self.leading_block

    def retained(self) -> bytes:
        """The bytes that must follow the new header."""
        if self.is_copyright_block():
            return self.remainder
        return self.leading_block + self.remainder
