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

import getpass
import os
from datetime import date
from pathlib import Path

from loguru import logger

from copyrighter.constants import AUTHOR_TOKEN, DEFAULT_TEMPLATE, ERROR_POLICIES
from copyrighter.context import GlobalConfig, StampContext
from copyrighter.core.data.comment_style import CommentStyle
from copyrighter.core.exceptions import (
    ConfigurationError,
    invalid_error_policy,
    invalid_style,
    no_extensions,
    no_targets,
    template_is_directory,
    template_not_readable,
)
from copyrighter.core.header.renderer import render_header
from copyrighter.core.walker.target_walker import parse_extensions


def validate_targets(targets: list[str] | None) -> tuple[str, ...]:
    if not targets:
        raise no_targets()
    return tuple(os.fspath(target) for target in targets)


def validate_style(style: str) -> CommentStyle:
    try:
        return CommentStyle(style)
    except ValueError:
        raise invalid_style(style, CommentStyle.choices()) from None


def validate_extensions(extensions: str) -> frozenset[str]:
    extension_set = parse_extensions(extensions)
    if not extension_set:
        raise no_extensions()
    return extension_set


def validate_error_policy(policy: str) -> str:
    if policy not in ERROR_POLICIES:
        raise invalid_error_policy(policy, ERROR_POLICIES)
    return policy


def load_template(path: str | None) -> str:
    """Read the template file, or return the built-in template if no path is given."""
    if not path:
        return DEFAULT_TEMPLATE

    template_path = Path(path)
    if template_path.is_dir():
        raise template_is_directory(path)
    try:
        return template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise template_not_readable(path, e) from e


def default_years() -> str:
    return str(date.today().year)


def default_authors() -> str:
    """
    The current user's display name.

    Uses the full name from the password database where there is one and
    falls back to the login name.
    """
    if hasattr(os, "getuid"):
        import pwd

        try:
            gecos = pwd.getpwuid(os.getuid()).pw_gecos
        except KeyError:
            gecos = ""
        display_name = gecos.split(",")[0].strip()
        if display_name:
            return display_name

    try:
        return getpass.getuser()
    except (OSError, KeyError) as e:
        raise ConfigurationError(
            "Unable to determine the author name.",
            f"Pass it explicitly with --authors ({e})",
        ) from e


def resolve_context(config: GlobalConfig, targets: list[str] | None) -> StampContext:
    """
    Validate a merged configuration and freeze it into a StampContext.

    All checks run before any file is touched.

    Raises:
        ConfigurationError: if any option is missing or invalid
    """
    validated_targets = validate_targets(targets)
    style = validate_style(config.style)
    extensions = validate_extensions(config.extensions)
    on_error = validate_error_policy(config.on_error)
    template = load_template(config.template)

    years = config.years if config.years is not None else default_years()
    authors = config.authors
    if authors is None and AUTHOR_TOKEN in template:
        authors = default_authors()

    header = render_header(template, style, years, authors)
    logger.debug(
        f"Resolved style={style.value} extensions={sorted(extensions)} "
        f"years={years!r} authors={authors!r} on_error={on_error}"
    )

    return StampContext(
        header=header,
        style=style,
        extensions=extensions,
        targets=validated_targets,
        quiet=config.quiet,
        on_error=on_error,
    )
