"""Click command group exposing the reporter from the shell.

Purpose
-------
Offer ``info`` (metadata banner), ``demo`` (simulated runner) and ``replay``
(feed a recorded JSON-lines event log through the reporter) while keeping
traceback handling and exit codes in :mod:`lib_cli_exit_tools`.

Contents
--------
* :func:`cli` - root group with global colour, dotenv and traceback options.
* :func:`main` - entry point used by ``python -m lib_report_rich`` and the
  console script.
"""

from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Iterator, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as report_config
from .adapters.events import EventEmitter
from .adapters.suites import JsonSuiteLookup
from .application.reporter import EVENTS
from .domain.suites import SuiteDefinition, suite_name
from .runtime import attach, configure_logging

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_DEMO_SUITES: dict[str, SuiteDefinition] = {
    "login": SuiteDefinition(
        config={"describe": "Sign in with a known account", "url": "https://example.test/login", "viewport": {"w": 1280, "h": 800}},
        tasks=({"type": "fill"}, {"type": "click"}),
    ),
}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _demo_lookup(ref: Any) -> SuiteDefinition:
    return _DEMO_SUITES[suite_name(ref)]


def _run_demo(*, delay: float, force_color: bool | None, no_color: bool | None) -> dict[str, Any]:
    """Drive a reporter with a scripted run; return a summary of what was emitted."""

    runner = EventEmitter()
    attach(runner, suite_lookup=_demo_lookup, force_color=force_color, no_color=no_color)
    emitted: list[str] = []

    def emit(event: str, *args: Any) -> None:
        emitted.append(event)
        runner.emit(event, *args)

    def pause() -> None:
        if delay > 0:
            time.sleep(delay)

    open_page = {"it": "open login page", "duration": 812}
    submit = {"type": "click", "params": {"selector": "#submit", "options": {"button": "left", "clickCount": 1}}}
    fill = {"type": "fill", "params": {"selector": "input[name=email]", "value": "demo.user@example.test"}}
    checkout = {"it": "open checkout", "duration": 1534}

    emit("begin", ["login.json", "checkout.json"])
    emit("start", "login.json")
    for task in (open_page, fill):
        emit("pending", task)
        pause()
        emit("pass", task)
    emit("pending", submit)
    pause()
    emit("error", {"type": "console", "details": "Uncaught TypeError"})
    emit("pass", {**submit, "duration": 240})
    emit("start", "checkout.json")
    emit("pending", checkout)
    pause()
    emit("fail", checkout, "Timeout after 1500ms")
    emit(
        "finish",
        {
            "timing": {
                "total": 2586,
                "slowest": {"test": checkout},
                "above": [{"test": checkout}, {"test": open_page}],
            },
            "errors": {
                "byError": {
                    "Timeout after 1500ms": {
                        "error": {"type": "timeout", "details": {"limit": 1500, "url": "https://example.test/checkout"}},
                        "tests": [{"test": checkout}],
                    }
                }
            },
        },
    )
    return {"events": emitted, "suites": ["login.json", "checkout.json"]}


def _read_event_log(path: Path) -> Iterator[tuple[str, list[Any]]]:
    """Yield ``(event, args)`` pairs from a JSON-lines file."""

    with path.open(encoding="utf-8") as handle:
        for number, raw in enumerate(handle, start=1):
            line = raw.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as exc:
                raise click.ClickException(f"{path}:{number}: invalid JSON ({exc.msg})") from exc
            event = record.get("event") if isinstance(record, dict) else None
            if event not in EVENTS:
                raise click.ClickException(f"{path}:{number}: unknown event {event!r}")
            args = record.get("args", [])
            if not isinstance(args, list):
                raise click.ClickException(f"{path}:{number}: 'args' must be a list")
            yield event, args


@click.group(
    help="Render test-runner lifecycle events as a live console report.",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load environment variables from a nearby .env (default: ${report_config.DOTENV_ENV_VAR}).",
)
@click.option("--force-color", is_flag=True, default=False, help="Emit colours even when stdout is not a terminal.")
@click.option("--no-color", is_flag=True, default=False, help="Disable colours.")
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    use_dotenv: bool | None,
    force_color: bool,
    no_color: bool,
) -> None:
    """Root command storing global options in ``ctx.obj``."""

    if report_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(report_config.DOTENV_ENV_VAR)):
        report_config.enable_dotenv()
    settings = report_config.ReporterSettings.from_env()
    configure_logging(settings.log_level)

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    ctx.ensure_object(dict)
    ctx.obj["force_color"] = force_color or settings.force_color
    ctx.obj["no_color"] = no_color or settings.no_color
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--delay", type=click.FloatRange(min=0.0), default=0.6, show_default=True, help="Seconds each pending task spins.")
@click.pass_context
def cli_demo(ctx: click.Context, delay: float) -> None:
    """Simulate a runner over two suites, one of them without a definition."""
    _run_demo(delay=delay, force_color=ctx.obj["force_color"], no_color=ctx.obj["no_color"])


@cli.command("replay", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("event_log", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--delay", type=click.FloatRange(min=0.0), default=0.0, show_default=True, help="Seconds to wait between events.")
@click.pass_context
def cli_replay(ctx: click.Context, event_log: Path, delay: float) -> None:
    """Feed a JSON-lines event log (``{"event": ..., "args": [...]}``) through the reporter.

    Suite references resolve relative to the log's directory.
    """

    events = list(_read_event_log(event_log))
    runner = EventEmitter()
    attach(
        runner,
        suite_lookup=JsonSuiteLookup(event_log.parent),
        force_color=ctx.obj["force_color"],
        no_color=ctx.obj["no_color"],
    )
    for event, args in events:
        runner.emit(event, *args)
        if delay > 0:
            time.sleep(delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code, restoring traceback preferences afterwards."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=__init__conf__.shell_command,
            )
        except BaseException as exc:  # noqa: BLE001
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=10_000 if lib_cli_exit_tools.config.traceback else 500,
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
