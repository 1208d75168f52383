import io
import json
import logging
import pytest
from unittest.mock import MagicMock

from fxexchange.core.config import Settings
from fxexchange.core.errors import ExchangeValidationError, report_error
from fxexchange.core.logging import JsonFormatter, conversion_context, conversion_id_ctx, init_logging
from fxexchange.main import CONTINUE_PROMPT, create_service, main, run
from fxexchange.utils.console import ConsoleHelper


@pytest.fixture
def console():
    return MagicMock(spec=ConsoleHelper)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_run_stops_on_q(console):
    service = MagicMock()
    console.read_key.side_effect = ["x", "q"]

    run(service, console)

    assert service.process_currency_exchange.call_count == 2
    console.write_line.assert_called_with(CONTINUE_PROMPT)


def test_run_stops_at_end_of_input(console):
    service = MagicMock()
    console.read_key.return_value = None

    run(service, console)

    service.process_currency_exchange.assert_called_once()


def test_run_reports_error_and_continues(console):
    """
    A failed iteration is printed and the loop keeps going.
    """
    service = MagicMock()
    service.process_currency_exchange.side_effect = [
        ExchangeValidationError("Amount must be a positive number."),
        None,
    ]
    console.read_key.side_effect = [" ", "Q"]

    run(service, console)

    assert service.process_currency_exchange.call_count == 2
    lines = [c.args[0] for c in console.write_line.call_args_list]
    assert lines[:3] == [
        "Error: Amount must be a positive number.",
        "Please try again.",
        CONTINUE_PROMPT,
    ]


def test_run_survives_unexpected_errors(console):
    service = MagicMock()
    service.process_currency_exchange.side_effect = [RuntimeError("boom"), None]
    console.read_key.side_effect = ["a", "q"]

    run(service, console)

    assert service.process_currency_exchange.call_count == 2
    console.write_line.assert_any_call("Error: boom")


def test_create_service_wires_configured_table():
    settings = Settings(
        exchange_rates={
            "load_from_config": True,
            "currencies": [
                {"code": "AAA", "name": "Currency A", "rate": "1.0"},
                {"code": "BBB", "name": "Currency B", "rate": "2.0"},
            ],
        }
    )
    stdout = io.StringIO()
    helper = ConsoleHelper(stdin=io.StringIO("aaa/bbb\n10\n"), stdout=stdout)

    create_service(settings, helper).process_currency_exchange()

    assert stdout.getvalue().endswith("10 AAA (Currency A) = 20.00 BBB (Currency B)\n")


def test_main_runs_session_from_config_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"use_system_locale": False}), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("EUR/DKK\n100\nq\n"))

    assert main(["--config", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Enter currency pair, e.g. EUR/DKK: " in out
    assert "Enter amount to convert: " in out
    assert "100 EUR (Euro) = 13.44 DKK (Danish kroner)" in out


def test_main_rejects_invalid_config(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"exchange_rates": {"load_from_config": True, "currencies": [{"code": "XX", "name": "x", "rate": 1}]}}),
        encoding="utf-8",
    )

    assert main(["--config", str(path)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_report_error_logs_warning(console, caplog):
    with caplog.at_level(logging.WARNING, logger="fxexchange.errors"):
        report_error(console, ExchangeValidationError("Currency pair cannot be empty."))

    assert "Currency pair cannot be empty." in caplog.text
    console.write_line.assert_any_call("Error: Currency pair cannot be empty.")


def test_json_formatter_includes_conversion_id():
    init_logging(debug=True)
    stream = io.StringIO()
    handler = logging.getLogger().handlers[0]
    handler.setStream(stream)

    with conversion_context() as cid:
        logging.getLogger("fxexchange.test").info("hello")

    records = [json.loads(line) for line in stream.getvalue().splitlines()]
    hello = next(r for r in records if r["message"] == "hello")
    assert hello["conversion_id"] == cid
    assert hello["level"] == "INFO"
    assert conversion_id_ctx.get() is None


def test_json_formatter_without_context():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    payload = json.loads(JsonFormatter().format(record))

    assert payload["conversion_id"] == "-"
    assert payload["message"] == "msg"


def test_json_formatter_carries_conversion_details():
    init_logging(debug=True)
    stream = io.StringIO()
    logging.getLogger().handlers[0].setStream(stream)
    console = MagicMock(spec=ConsoleHelper)
    console.read_line.side_effect = ["EUR/DKK", "100"]

    with conversion_context() as cid:
        create_service(Settings(), console).process_currency_exchange()

    records = [json.loads(line) for line in stream.getvalue().splitlines()]
    converted = next(r for r in records if r["logger"] == "fxexchange.exchange")
    assert converted["conversion_id"] == cid
    assert converted["pair"] == "EUR/DKK"
    assert converted["amount"] == "100"
    assert converted["base_rate"] == "7.4394"
    assert converted["quote_rate"] == "1.0"


@pytest.mark.parametrize("payload", [[1, 2], "text", 42])
def test_main_rejects_config_that_is_not_an_object(tmp_path, capsys, payload):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    assert main(["--config", str(path)]) == 2
    assert "top level must be a JSON object" in capsys.readouterr().err
