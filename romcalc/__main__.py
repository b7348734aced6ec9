"""CLI for the romcalc calculator.

Usage:
    python -m romcalc eval "2 + 3 * 2"        # Print the result
    python -m romcalc eval "V + I" --trace    # Also show tokens and postfix
    python -m romcalc rpn "2 + 3 * 2"         # Print the postfix form
    python -m romcalc roman IX                # Roman → integer
    python -m romcalc roman 9                 # Integer → Roman
    python -m romcalc batch FILE              # Evaluate one expression per line
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from romcalc.calculator import explain
from romcalc.errors import CalculatorError, MalformedTokenError, OutOfRangeError
from romcalc.lexer import detect_notation, tokenize
from romcalc.models import Evaluation, Notation, render_tokens
from romcalc.postfix import to_postfix
from romcalc.roman import MAX_ROMAN, int_to_roman, roman_to_int

app = typer.Typer(
    name="romcalc",
    help="Arabic / Roman numeral expression calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _fail(exc: CalculatorError) -> None:
    """Report a calculator error on stderr and exit non-zero."""
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(1)


def _print_trace(evaluation: Evaluation) -> None:
    notation = evaluation.notation
    console.print(f"[dim]Notation:[/dim] {notation.value}")
    console.print(f"[dim]Tokens:  [/dim] {escape(render_tokens(evaluation.tokens, notation))}")
    console.print(f"[dim]Postfix: [/dim] {escape(render_tokens(evaluation.postfix, notation))}")
    console.print(f"[dim]Value:   [/dim] {evaluation.value}")


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '2 + 3 * 2' or 'V + I'"),
    trace: bool = typer.Option(False, "--trace", "-t", envvar="ROMCALC_TRACE", help="Show tokens and postfix form"),
) -> None:
    """Evaluate an expression and print the result."""
    try:
        evaluation = explain(expression)
    except CalculatorError as e:
        _fail(e)
    if trace:
        _print_trace(evaluation)
    typer.echo(evaluation.result)


@app.command("rpn")
def cmd_rpn(
    expression: str = typer.Argument(help="Expression to convert to postfix"),
) -> None:
    """Print the postfix (Reverse Polish) form of an expression."""
    notation = detect_notation(expression)
    try:
        postfix = to_postfix(tokenize(expression, notation))
    except CalculatorError as e:
        _fail(e)
    typer.echo(render_tokens(postfix, notation))


@app.command("roman")
def cmd_roman(
    value: str = typer.Argument(help="Roman numeral (IX) or integer (9) to convert"),
) -> None:
    """Convert between a Roman numeral and an integer."""
    try:
        if detect_notation(value) == Notation.ROMAN:
            typer.echo(str(roman_to_int(value)))
        elif value.isascii() and value.isdigit():
            number = int(value)
            if number < 1:
                raise OutOfRangeError(f"Cannot express {number} as a Roman numeral (1..{MAX_ROMAN})")
            typer.echo(int_to_roman(number))
        else:
            raise MalformedTokenError(f"Not a numeral: {value!r}")
    except CalculatorError as e:
        _fail(e)


@app.command("batch")
def cmd_batch(
    path: Path = typer.Argument(help="File with one expression per line"),
) -> None:
    """Evaluate every expression in a file and show a results table."""
    if not path.is_file():
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"romcalc: {path.name}", show_header=True, header_style="bold")
    table.add_column("Expression", style="cyan", min_width=12)
    table.add_column("Notation", style="dim")
    table.add_column("Result", justify="right", style="green")
    table.add_column("Error", style="red")

    failures = 0
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        notation = detect_notation(line)
        try:
            evaluation = explain(line)
        except CalculatorError as e:
            failures += 1
            table.add_row(escape(line), notation.value, "--", f"{type(e).__name__}: {escape(str(e))}")
            continue
        typer.echo(f"{line} = {evaluation.result}")
        table.add_row(escape(line), notation.value, evaluation.result, "")

    console.print()
    console.print(table)
    console.print()

    if failures:
        console.print(f"[yellow]{failures} expression(s) failed[/yellow]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
