"""CLI for bufmt: format / concat / measure / parse / bench commands."""

from __future__ import annotations

import time
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from bufmt.buffers import Substr
from bufmt.convert import Ref, write
from bufmt.core.config import get_settings
from bufmt.core.startup_checks import validate_settings
from bufmt.core.types import NPOS
from bufmt.engines import (
    concatenate,
    concatenate_separated,
    format_substitute,
    parse_formatted,
)
from bufmt.fmt import RealFormat, boolean, integral, real
from bufmt.growth import render
from bufmt.hooks.logging_config import setup_logging

app = typer.Typer(name="bufmt", help="Buffer-exact text formatting and parsing")
console = Console()

_PARSE_TYPES = {"int": int, "float": float, "str": str, "bool": bool}


def _coerce(raw: str) -> Any:
    """Turn numeric-looking CLI arguments into ints or floats."""
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _arguments(values: Optional[list[str]], typed: bool) -> list[Any]:
    values = values or []
    return [_coerce(v) for v in values] if typed else list(values)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    """Configure logging and validate settings before any command runs."""
    settings = get_settings()
    observability = settings.observability
    if verbose:
        observability = observability.model_copy(update={"log_level": "DEBUG"})
    setup_logging(observability)
    validate_settings(settings)


@app.command("format")
def format_cmd(
    template: str = typer.Argument(..., help="Template with {} placeholders"),
    args: Optional[list[str]] = typer.Argument(None, help="Values to substitute"),
    typed: bool = typer.Option(False, "--typed", help="Treat numeric arguments as numbers"),
) -> None:
    """Substitute arguments into a template."""
    out = render(format_substitute, template, *_arguments(args, typed))
    console.print(out.decode("utf-8"), markup=False, highlight=False)


@app.command()
def concat(
    args: Optional[list[str]] = typer.Argument(None, help="Values to concatenate"),
    sep: Optional[str] = typer.Option(None, "--sep", help="Separator between values"),
    typed: bool = typer.Option(False, "--typed", help="Treat numeric arguments as numbers"),
) -> None:
    """Concatenate arguments, optionally with a separator."""
    values = _arguments(args, typed)
    if sep is None:
        out = render(concatenate, *values)
    else:
        out = render(concatenate_separated, sep, *values)
    console.print(out.decode("utf-8"), markup=False, highlight=False)


@app.command()
def measure(
    template: str = typer.Argument(..., help="Template with {} placeholders"),
    args: Optional[list[str]] = typer.Argument(None, help="Values to substitute"),
    size: int = typer.Option(..., "--size", min=0, help="Buffer size to format into"),
    typed: bool = typer.Option(False, "--typed", help="Treat numeric arguments as numbers"),
) -> None:
    """Format into a fixed buffer and report the required size."""
    buf = bytearray(size)
    required = format_substitute(buf, template, *_arguments(args, typed))
    written = bytes(buf[: min(required, size)])

    table = Table(title="Fixed-buffer conversion")
    table.add_column("Buffer")
    table.add_column("Required")
    table.add_column("Written")
    table.add_column("Fits")
    table.add_row(str(size), str(required), repr(written), "yes" if required <= size else "no")
    console.print(table)


@app.command()
def parse(
    template: str = typer.Argument(..., help="Template with {} placeholders"),
    text: str = typer.Argument(..., help="Input to parse"),
    types: list[str] = typer.Option(
        ..., "--type", "-t", help="Type of each placeholder: int, float, str, bool"
    ),
) -> None:
    """Parse values out of TEXT at the template's placeholders."""
    unknown = [t for t in types if t not in _PARSE_TYPES]
    if unknown:
        raise typer.BadParameter(f"Unknown types {unknown}; choose from {sorted(_PARSE_TYPES)}")
    refs = [Ref(_PARSE_TYPES[t]) for t in types]
    consumed = parse_formatted(text, template, *refs)
    if consumed == NPOS:
        console.print("[red]not found[/red]")
        raise typer.Exit(code=1)

    table = Table(title=f"Parsed {consumed} characters")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Value")
    for index, ref in enumerate(refs):
        table.add_row(str(index), ref.type.__name__, repr(ref.value))
    console.print(table)


def _time_writes(value: Any, iterations: int, repeat: int) -> float:
    """Best-of-``repeat`` nanoseconds per write of ``value``."""
    buf = Substr(bytearray(64))
    best = float("inf")
    for _ in range(repeat):
        start = time.perf_counter_ns()
        for _ in range(iterations):
            write(buf, value)
        best = min(best, (time.perf_counter_ns() - start) / iterations)
    return best


@app.command()
def bench(
    iterations: Optional[int] = typer.Option(None, help="Writes per measurement"),
    repeat: Optional[int] = typer.Option(None, help="Measurements per case (best is kept)"),
) -> None:
    """Time single-value writes for integers and floats."""
    settings = get_settings().bench
    iterations = iterations or settings.iterations
    repeat = repeat or settings.repeat

    cases: list[tuple[str, Any]] = [
        ("int", 1234567),
        ("bool", boolean(True)),
        *[(f"int radix {radix}", integral(-1234567, radix)) for radix in (2, 8, 10, 16)],
        ("float", 3.14159265358979),
        *[
            (f"float {notation.name.lower()}", real(3.14159265358979, -1, notation))
            for notation in RealFormat
        ],
        ("float32 shortest", real(3.14159265358979, width=32)),
    ]

    table = Table(title=f"write() timings ({iterations} iterations, best of {repeat})")
    table.add_column("Case")
    table.add_column("ns/op", justify="right")
    for name, value in cases:
        table.add_row(name, f"{_time_writes(value, iterations, repeat):.1f}")
    console.print(table)


if __name__ == "__main__":
    app()
