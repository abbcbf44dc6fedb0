"""DASHKIT CLI entry point.

Defines the top-level ``dashkit`` command (via Click-Extra), configures
console logging, bootstraps a `Toolkit` into the Click context object, and
registers the helper subcommands.

Examples
    $ dashkit --version
    $ dashkit shuffle a b c --seed 7
    $ dashkit pick '{"a": 1, "b": 2}' a
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from dashkit import __version__
from dashkit.bootstrap import bootstrap
from dashkit.config import InvalidSettingError, load_settings
from dashkit.logging import config_console_handler, log_startup

from .commands import fetch, omit, pick, shuffle
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """DASHKIT command-line interface.

    Exercise the toolkit's stateless helpers from a shell: shuffle values,
    project JSON objects with pick/omit, and fetch URLs.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L dashkit.toolkit=DEBUG -L asyncio=ERROR) or comma/space separated."
    ),
    default=("asyncio=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def dashkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """DASHKIT command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler on the root logger
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 2) set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 3) resolve settings and wire the toolkit
    try:
        settings = load_settings()
    except InvalidSettingError as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    ctx.obj = bootstrap(settings=settings)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        settings=settings,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


dashkit.add_command(shuffle)
dashkit.add_command(pick)
dashkit.add_command(omit)
dashkit.add_command(fetch)
