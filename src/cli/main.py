"""iotsend command line.

Sends one IOT message (properties + payload) to the IOTHub service:

    iotsend [-v] [-h] [-H headers] [filename]

The payload is read from `filename`, or from standard input when no file is
given. Several properties go in a single `-H` argument separated by `;`
(``-H "source:sensor;type:json"``).
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.iot_client import IoTClient
from cli.ui_components import build_properties_table, build_result_text
from core.config import AppSettings
from core.domain.headers import parse_properties
from core.domain.models import RunConfig
from core.errors import ClientCreationError, IoTSendError
from core.logger_config import setup_logger
from core.services.send_pipeline import SendHooks, send_message

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Send an IOT message to the IOTHub service.",
)

_err_console = Console(stderr=True)

_PARAM_HINTS = {"file_path": "FILENAME", "headers": "-H"}


def _print_error(message: str) -> None:
    _err_console.print(message, style="red", markup=False, highlight=False)


def _print_warning(message: str) -> None:
    _err_console.print(message, style="yellow", markup=False, highlight=False)


def _first_error(exc: ValidationError) -> tuple[str, str]:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else ""
    message = error["msg"].removeprefix("Value error, ")
    return field, message


def _describe_settings_error(exc: ValidationError) -> str:
    lines = ["Invalid configuration:"]
    for error in exc.errors():
        name = "IOTSEND_" + "_".join(str(part) for part in error["loc"]).upper()
        lines.append(f"  {name}: {error['msg']}")
    return "\n".join(lines)


@app.command()
def send(
    filename: str | None = typer.Argument(
        None,
        help="Payload file. Reads standard input when omitted.",
        show_default=False,
    ),
    headers: str | None = typer.Option(
        None,
        "-H",
        "--headers",
        help="Message properties as key:value pairs separated by ';'.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output."),
) -> None:
    """Send a file (or standard input) as an IOT message."""

    try:
        config = RunConfig(verbose=verbose, file_path=filename, headers=headers)
    except ValidationError as exc:
        field, message = _first_error(exc)
        raise typer.BadParameter(message, param_hint=_PARAM_HINTS.get(field)) from exc

    setup_logger(config.verbose, console=_err_console)
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _print_error(_describe_settings_error(exc))
        raise typer.Exit(code=1) from exc

    try:
        client = IoTClient.create(settings)
    except ClientCreationError as exc:
        _print_error(str(exc))
        raise typer.Exit(code=1) from exc

    hooks = SendHooks(warning=_print_warning)
    if config.verbose:
        hooks.sending = lambda text, source: _err_console.print(
            build_properties_table(parse_properties(text), source=source)
        )

    with client:
        client.set_verbose(config.verbose)
        try:
            result = send_message(config, client, settings=settings, hooks=hooks)
        except IoTSendError as exc:
            _print_error(str(exc))
            raise typer.Exit(code=1) from exc

    if config.verbose and result.stream is not None:
        _err_console.print(build_result_text(result.stream))


def run() -> None:
    app()
