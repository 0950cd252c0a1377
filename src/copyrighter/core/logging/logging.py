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
Logging configuration for the copyrighter CLI application.

Progress lines go to stdout exactly as logged, warnings and errors go
through a rich console on stderr, and every run also writes a detailed
log file under the user log directory.
"""

import os
from datetime import datetime
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from copyrighter.constants import APP_NAME, ENV_APP_PREFIX, LOG_DIR

LOG_LEVEL_ENV = ENV_APP_PREFIX + "LOG_LEVEL"


class StructuredLogger:
    """Structured logging helper for consistent log formatting."""

    def __init__(
        self, command_name: str, log_level: str, console_level: str, log_dir: Path
    ):
        self.command_name = command_name
        self.log_level = log_level
        self.console_level = console_level
        self.log_dir = log_dir
        self.error_console = Console(stderr=True, soft_wrap=True)
        self.logfile: Path | None = None
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru with proper formatting and sinks."""
        # Clear existing sinks to avoid duplicates
        logger.remove()

        def console_sink(message):
            record = message.record
            text = record["message"].rstrip("\n")
            if record["level"].no >= logger.level("WARNING").no:
                self.error_console.print(
                    text, markup=False, highlight=False, emoji=False
                )
            else:
                # progress lines name paths, so they are written unrendered
                typer.echo(text)

        logger.add(
            console_sink, level=self.console_level, format="{message}", catch=True
        )

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug(f"File logging disabled, cannot create {self.log_dir}: {e}")
            return

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = self.log_dir / f"{APP_NAME}_{timestamp}.log"

        # File sink with detailed formatting
        logger.add(
            logfile,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
            backtrace=True,
            diagnose=False,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=self.log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path | None:
        """Get the current log file path, None when file logging is off."""
        return self.logfile


def setup_logger(
    command_name: str,
    debug: bool = False,
    silent: bool = False,
    log_dir: Path | None = None,
) -> Path | None:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug logging on the console
        silent: Only show warnings and errors on the console
        log_dir: Directory for the log file, defaults to the user log dir

    Returns:
        Path to the log file, or None if it could not be created
    """
    log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    console_level = log_level

    if silent:
        console_level = "WARNING"
    # debug wins over silent so that problems can still be traced
    if debug:
        log_level = "DEBUG"
        console_level = "DEBUG"

    structured_logger = StructuredLogger(
        command_name, log_level, console_level, log_dir or LOG_DIR
    )
    return structured_logger.get_logfile()
