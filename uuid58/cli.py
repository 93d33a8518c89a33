"""Command line wrapper around the uuid58 codec.

The command surface is implemented with Typer and Rich for help and error
ergonomics, while command payload outputs remain machine-friendly JSON.
"""

from __future__ import annotations

import json
import os
import sys
import time
from dataclasses import dataclass
from typing import Any, Callable

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from . import __version__
from .check import is_uuid58
from .decoder import decode
from .encoder import encode
from .errors import Uuid58Error
from .generator import uuid58


class CliError(Exception):
    pass


class UsageError(CliError):
    pass


class OpError(CliError):
    pass


UUID58_PRETTY = "UUID58_PRETTY"
UUID58_QUIET = "UUID58_QUIET"
GENERATE_MAX_COUNT = 10000

_ERROR_CONSOLE = Console(stderr=True)


@dataclass(frozen=True)
class GlobalOpts:
    pretty: bool
    quiet: bool


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}")


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _bootstrap_env() -> None:
    # Discover and load .env without overriding already-exported values.
    load_dotenv()


def _print_json(obj: Any, *, pretty: bool) -> None:
    if pretty:
        sys.stdout.write(json.dumps(obj, indent=2, sort_keys=True) + "\n")
    else:
        sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")


def _ctx_global(ctx: typer.Context) -> GlobalOpts:
    if isinstance(ctx.obj, dict) and isinstance(ctx.obj.get("g"), GlobalOpts):
        return ctx.obj["g"]
    return GlobalOpts(
        pretty=_truthy(os.environ.get(UUID58_PRETTY)),
        quiet=_truthy(os.environ.get(UUID58_QUIET)),
    )


def _input_values(values: list[str] | None) -> list[str]:
    raw = list(values or [])
    if not raw or raw == ["-"]:
        if sys.stdin.isatty():
            raise UsageError("no input values (pass arguments or pipe one value per line on stdin)")
        raw = [line.strip() for line in sys.stdin.read().splitlines() if line.strip()]
    if not raw:
        raise UsageError("no input values (pass arguments or pipe one value per line on stdin)")
    return raw


def _new_event(command: str) -> dict[str, Any]:
    return {"event": "uuid58.cli", "command": command, "version": __version__}


def _emit_event(g: GlobalOpts, wide_event: dict[str, Any], *, start: float) -> None:
    wide_event["duration_ms"] = int((time.time() - start) * 1000)
    if not g.quiet:
        _eprint(json.dumps(wide_event, separators=(",", ":"), sort_keys=True))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"uuid58 {__version__}")
        raise typer.Exit(code=0)


app = typer.Typer(
    name="uuid58",
    help="Convert UUIDs to and from 22-character Base58 ids.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def app_callback(
    ctx: typer.Context,
    pretty: bool = typer.Option(False, "--pretty", help=f"Indent JSON output (env: {UUID58_PRETTY})"),
    quiet: bool = typer.Option(False, "--quiet", help=f"Suppress the stderr event log (env: {UUID58_QUIET})"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    ctx.obj = {
        "g": GlobalOpts(
            pretty=pretty or _truthy(os.environ.get(UUID58_PRETTY)),
            quiet=quiet or _truthy(os.environ.get(UUID58_QUIET)),
        )
    }


def _convert(
    ctx: typer.Context,
    *,
    command: str,
    values: list[str] | None,
    fn: Callable[[str], str],
    in_key: str,
    out_key: str,
) -> None:
    g = _ctx_global(ctx)
    start = time.time()
    wide_event = _new_event(command)
    try:
        inputs = _input_values(values)
        wide_event["count"] = len(inputs)
        items = [{in_key: v, out_key: fn(v)} for v in inputs]
        wide_event["outcome"] = "success"
    except Uuid58Error as e:
        wide_event["outcome"] = "invalid_input"
        wide_event["error"] = {"type": type(e).__name__, "message": str(e)}
        raise OpError(str(e)) from e
    except UsageError:
        wide_event["outcome"] = "usage_error"
        raise
    finally:
        _emit_event(g, wide_event, start=start)
    _print_json({"kind": f"uuid58.{command}.v1", "items": items}, pretty=g.pretty)


@app.command("encode", help="Encode UUIDs (hyphens optional, any case) as uuid58 ids.")
def encode_cmd(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None, help="UUID text; '-' or none reads stdin"),
) -> None:
    _convert(ctx, command="encode", values=values, fn=encode, in_key="uuid", out_key="uuid58")


@app.command("decode", help="Decode uuid58 ids to canonical lowercase UUID text.")
def decode_cmd(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None, help="uuid58 ids; '-' or none reads stdin"),
) -> None:
    _convert(ctx, command="decode", values=values, fn=decode, in_key="uuid58", out_key="uuid")


@app.command("check", help="Report whether each value is a valid uuid58 id (exit 1 if any is not).")
def check_cmd(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(None, help="Candidate ids; '-' or none reads stdin"),
) -> None:
    g = _ctx_global(ctx)
    start = time.time()
    wide_event = _new_event("check")
    try:
        candidates = _input_values(values)
        items = [{"uuid58": v, "valid": is_uuid58(v)} for v in candidates]
        all_valid = all(item["valid"] for item in items)
        wide_event["count"] = len(items)
        wide_event["invalid"] = sum(1 for item in items if not item["valid"])
        wide_event["outcome"] = "success" if all_valid else "invalid_input"
    except UsageError:
        wide_event["outcome"] = "usage_error"
        raise
    finally:
        _emit_event(g, wide_event, start=start)
    _print_json({"kind": "uuid58.check.v1", "items": items, "valid": all_valid}, pretty=g.pretty)
    if not all_valid:
        raise typer.Exit(code=1)


@app.command("generate", help="Generate random (version 4) UUIDs as uuid58 ids.")
def generate_cmd(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=1, max=GENERATE_MAX_COUNT, help="Number of ids"),
) -> None:
    g = _ctx_global(ctx)
    start = time.time()
    wide_event = _new_event("generate")
    wide_event["count"] = count
    try:
        items = [uuid58() for _ in range(count)]
        wide_event["outcome"] = "success"
    finally:
        _emit_event(g, wide_event, start=start)
    _print_json({"kind": "uuid58.generate.v1", "items": items}, pretty=g.pretty)


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name="uuid58", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except typer.TyperException as e:
        _rich_error(e.format_message())
        return int(e.exit_code)
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except OpError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
