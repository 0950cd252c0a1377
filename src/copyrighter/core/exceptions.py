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
Custom exception hierarchy for the copyrighter CLI application.

This module defines the exceptions raised while resolving configuration
and rewriting files, plus the handler that turns them into a clean exit
for the command line.
"""

import functools
from pathlib import Path

import typer
from loguru import logger


class CopyrighterError(Exception):
    """
    Base exception for all copyrighter-related errors.

    All copyrighter-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a CopyrighterError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(CopyrighterError):
    """
    Configuration-related errors.

    Raised when command line input, environment variables or a config
    file are missing, invalid, or contain incompatible settings. No file
    has been touched when one of these is raised.
    """

    pass


class TemplateError(ConfigurationError):
    """Raised when the header template cannot be loaded."""

    pass


class FileSystemError(CopyrighterError):
    """
    File system operation errors.

    Raised when reading or rewriting a target file fails, such as
    permission issues or missing files.
    """

    def __init__(
        self,
        message: str,
        details: str = None,
        path: Path | str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, details)
        self.path = path
        self.cause = cause


# Convenience functions for creating common errors
def no_targets() -> ConfigurationError:
    """Create a ConfigurationError for when no target was given."""
    return ConfigurationError(
        "At least one directory or file must be specified.",
        "Pass one or more paths after the options, e.g. 'copyrighter src'",
    )


def invalid_style(style: str, choices: list[str]) -> ConfigurationError:
    """Create a ConfigurationError for an unknown comment style."""
    return ConfigurationError(
        f"The style option must be one of: {', '.join(choices)}",
        f"Got style={style!r}",
    )


def no_extensions() -> ConfigurationError:
    """Create a ConfigurationError for an empty extension set."""
    return ConfigurationError(
        "The extensions option must specify at least one extension.",
        "Use a comma-separated list such as 'go,py' or '.c,.h'",
    )


def invalid_error_policy(policy: str, choices: tuple[str, ...]) -> ConfigurationError:
    """Create a ConfigurationError for an unknown error policy."""
    return ConfigurationError(
        f"The on-error option must be one of: {', '.join(choices)}",
        f"Got on_error={policy!r}",
    )


def template_not_readable(path: str, cause: BaseException) -> TemplateError:
    """Create a TemplateError for a template file that could not be read."""
    return TemplateError(
        f"Unable to read template file: {path}",
        str(cause),
    )


def template_is_directory(path: str) -> TemplateError:
    """Create a TemplateError for a template path pointing at a directory."""
    return TemplateError(
        f"The template must be a file: {path}",
        "Point --template at a text file containing the header body",
    )


def file_operation_failed(
    action: str, path: Path | str, cause: BaseException
) -> FileSystemError:
    """Create a FileSystemError wrapping an OS error on a target file."""
    return FileSystemError(
        f"Unable to {action} {path}: {cause}",
        repr(cause),
        path=path,
        cause=cause,
    )


def _log_error(error: BaseException, debug: bool) -> None:
    if isinstance(error, CopyrighterError):
        logger.error(error.message)
        if error.details:
            logger.debug(error.details)
    else:
        logger.error(f"Unexpected error: {error}")
    if debug:
        logger.opt(exception=error).debug("Traceback")


class _ExceptionHandler:
    def __init__(self, exit_on_fail: bool = True, debug: bool = False):
        self.exit_on_fail = exit_on_fail
        self.debug = debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc is None:
            return False
        # let typer/click control flow pass through untouched
        if isinstance(exc, (typer.Exit, typer.Abort, KeyboardInterrupt)):
            return False
        if not isinstance(exc, Exception):
            return False

        _log_error(exc, self.debug)
        if self.exit_on_fail:
            raise typer.Exit(1) from exc
        return True


def handle_copyrighter_exception(
    func=None, *, exit_on_fail: bool = True, debug: bool = False
):
    """
    Log copyrighter errors and turn them into a non-zero exit.

    Usable as a plain decorator, a decorator with arguments, or a context
    manager:

        @handle_copyrighter_exception
        def main(...): ...

        with handle_copyrighter_exception(exit_on_fail=True):
            ...
    """
    if func is not None and callable(func):

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with _ExceptionHandler(exit_on_fail=exit_on_fail, debug=debug):
                return func(*args, **kwargs)

        return wrapper

    return _ExceptionHandler(exit_on_fail=exit_on_fail, debug=debug)
