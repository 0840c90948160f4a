"""COSTCALC CLI entry point.

Defines the top-level ``costcalc`` command (via Click-Extra) and registers
the subcommands exposed by the project.

Currently available commands
- ``costcalc calculate``   - one calculation from command-line options.
- ``costcalc interactive`` - menu-driven session with bounded re-prompting.

Notes
- The CLI version is sourced from `costcalc.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The resolved `CurrencyFormat` is stored as the context object for
  subcommands.

Examples
    $ costcalc --version
    $ costcalc calculate --cost 100 --quantity 3 --delivery 20 --mode standard
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from costcalc import __version__
from costcalc.config import InvalidCurrencyConfigError, get_currency_format
from costcalc.logging import config_console_handler, config_flight_recorder, log_startup

from .calculate import calculate
from .helpers.log_level_parser import parse_log_level
from .interactive import interactive

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """COSTCALC command-line interface.

    COSTCALC works out what an order of identical items really costs: item
    price times quantity, plus delivery, minus any discount, plus tax on the
    discounted amount. Results are printed as a fixed-width breakdown and a
    one-line summary.
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
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("costcalc", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="COSTCALC_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="COSTCALC_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via COSTCALC_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,  # repeatable option
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L costcalc.domain=DEBUG) or via COSTCALC_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--currency-symbol",
    "currency_symbol",
    help="Currency symbol used in reports (overrides COSTCALC_CURRENCY_SYMBOL).",
    default=None,
)
@clickx.pass_context
def costcalc(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    currency_symbol: str | None,
) -> None:
    """COSTCALC command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure flight recorder
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 3) Configure root logger with configured handlers
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,  # override any existing logging config
    )

    # 4) Set per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 5) Resolve the currency format for subcommands
    try:
        currency = get_currency_format(symbol=currency_symbol)
    except InvalidCurrencyConfigError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = currency

    # 6) Log startup info
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
        currency=currency,
    )

    # 7) Ensure logging is cleanly shutdown on program exit
    ctx.call_on_close(logging.shutdown)


costcalc.add_command(calculate)
costcalc.add_command(interactive)
