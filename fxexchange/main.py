import argparse
import locale
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .core.config import Settings, load_settings
from .core.errors import report_error
from .core.logging import conversion_context, init_logging
from .services.console_ui import ConsoleUserInterface
from .services.exchange import StaticExchangeService
from .services.rates.providers import make_rate_provider
from .utils.console import ConsoleHelper

logger = logging.getLogger("fxexchange")

CONTINUE_PROMPT = "Press any key to continue or 'Q' to quit."


def create_service(
    settings: Settings, console: ConsoleHelper
) -> StaticExchangeService:
    """Wire provider -> console UI -> exchange service by hand."""
    provider = make_rate_provider(settings.exchange_rates)
    ui = ConsoleUserInterface(provider, console)
    return StaticExchangeService(provider, ui)


def run(service: StaticExchangeService, console: ConsoleHelper) -> None:
    """Convert until the user presses Q (or input runs out).

    A failed iteration is reported and never ends the loop.
    """
    while True:
        with conversion_context():
            try:
                service.process_currency_exchange()
            except Exception as exc:  # noqa: BLE001
                report_error(console, exc)

        console.write_line(CONTINUE_PROMPT)
        key = console.read_key()
        if key is None or key.upper() == "Q":
            break


def _use_system_locale() -> None:
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error:
        logger.warning("could not adopt system numeric locale; using defaults")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fxexchange", description="Convert amounts between currencies."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON settings file (overrides environment variables)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Verbose JSON logs on stderr"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (ValidationError, ValueError, OSError) as exc:
        init_logging(debug=args.debug)
        logger.error("invalid configuration: %s", exc)
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    init_logging(debug=args.debug or settings.debug, level=settings.log_level)
    if settings.use_system_locale:
        _use_system_locale()

    console = ConsoleHelper()
    try:
        service = create_service(settings, console)
    except ValueError:
        logger.exception("failed to build rate table")
        raise
    logger.info("%s %s started", settings.app_name, settings.version)
    run(service, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
