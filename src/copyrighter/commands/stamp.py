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

import typer
from loguru import logger

from copyrighter.constants import ENV_APP_PREFIX
from copyrighter.context import GlobalConfig, StampResult
from copyrighter.core.config.config_loader import ConfigLoader
from copyrighter.core.exceptions import handle_copyrighter_exception
from copyrighter.core.logging.logging import setup_logger
from copyrighter.core.validation import resolve_context
from copyrighter.runtimeutil import version_callback

descriptions = GlobalConfig.descriptions


def load_global_config(custom_config_path: Path | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {}

    for key, item in input_args.items():
        if item is not None:
            config_args[key] = item

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        ENV_APP_PREFIX,
        custom_config_path=custom_config_path,
    )


def report(result: StampResult) -> None:
    if not result.failed:
        logger.debug(f"Updated {len(result.updated)} files")
        return

    logger.warning(f"Updated {len(result.updated)} of {result.total} files")
    for path, error in result.failed:
        logger.warning(f"Failed {path}: {error}")


def run_stamp(config: GlobalConfig, targets: list[str] | None) -> StampResult:
    from copyrighter.pipelines.stamp_pipeline import StampPipeline

    context = resolve_context(config, targets)
    return StampPipeline(context).run()


def main(
    targets: list[str] | None = typer.Argument(
        None,
        metavar="<dir | file>...",
        help="Directories and files to process.",
        show_default=False,
    ),
    template: str | None = typer.Option(
        None, "--template", "-t", metavar="FILE", help=descriptions["template"]
    ),
    extensions: str | None = typer.Option(
        None, "--extensions", "-e", help=descriptions["extensions"]
    ),
    style: str | None = typer.Option(
        None, "--style", "-s", help=descriptions["style"]
    ),
    years: str | None = typer.Option(
        None, "--years", "--year", "-y", help=descriptions["years"]
    ),
    authors: str | None = typer.Option(
        None, "--authors", "-a", help=descriptions["authors"]
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help=descriptions["quiet"]),
    debug: bool = typer.Option(False, "--debug", "-d", help=descriptions["debug"]),
    on_error: str | None = typer.Option(
        None, "--on-error", help=descriptions["on_error"]
    ),
    custom_config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to a TOML file with option values (same names as the options)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Inserts and adjusts copyright notices in source files.

    Examples:
        # Stamp all Go files under the current directory
        copyrighter .

        # Python and shell files with a custom template
        copyrighter -s hash -e py,sh -t header.txt src scripts

        # Keep going past unwritable files and report them at the end
        copyrighter --on-error continue .
    """
    setup_logger("stamp", debug=debug, silent=quiet)

    with handle_copyrighter_exception(exit_on_fail=True, debug=debug):
        config, used_config_sources, _ = load_global_config(
            custom_config,
            template=template,
            extensions=extensions,
            style=style,
            years=years,
            authors=authors,
            quiet=quiet or None,
            debug=debug or None,
            on_error=on_error,
        )
        logger.debug(f"Used {used_config_sources} to build the configuration.")

        if (config.debug, config.quiet) != (debug, quiet):
            setup_logger("stamp", debug=config.debug, silent=config.quiet)

        result = run_stamp(config, targets)

    report(result)
    if not result.success:
        raise typer.Exit(1)
