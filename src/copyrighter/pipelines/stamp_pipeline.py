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

from loguru import logger

from copyrighter.context import StampContext, StampResult
from copyrighter.core.exceptions import FileSystemError
from copyrighter.core.logging.utils import time_block
from copyrighter.core.rewriter.file_rewriter import FileRewriter
from copyrighter.core.walker.target_walker import iter_target_files


class StampPipeline:
    """Walks every target and rewrites the header of each matching file."""

    def __init__(self, context: StampContext, rewriter: FileRewriter | None = None):
        self.context = context
        self.rewriter = rewriter or FileRewriter(
            context.style, context.header, quiet=context.quiet
        )

    def run(self) -> StampResult:
        result = StampResult()
        with time_block("Stamp pipeline"):
            for target in self.context.targets:
                self._process_target(target, result)
        return result

    def _process_target(self, target: str, result: StampResult) -> None:
        def on_walk_error(error: FileSystemError) -> None:
            self._record_failure(error.path or target, error, result)

        for path in iter_target_files(target, self.context.extensions, on_walk_error):
            try:
                self.rewriter.rewrite(path)
            except FileSystemError as e:
                self._record_failure(path, e, result)
                continue
            result.updated.append(path)

    def _record_failure(
        self, path: str, error: FileSystemError, result: StampResult
    ) -> None:
        if not self.context.continue_on_error:
            raise error
        logger.warning(f"Skipping {path}: {error.message}")
        result.failed.append((str(path), error))
