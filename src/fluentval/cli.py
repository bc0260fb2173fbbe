"""CLI interface for fluentval using Typer framework."""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fluentval import __description__, __version__
from fluentval.config import FluentValConfig, LogLevel, load_config
from fluentval.rules.builder import RuleBuilder
from fluentval.validation.validator import Validator

app = typer.Typer(
    name="fluentval",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

# Rules usable from the command line: every one takes no arguments
CHECK_RULES: dict[str, Callable[[RuleBuilder], RuleBuilder]] = {
    "iban": RuleBuilder.is_iban,
    "credit-card": RuleBuilder.credit_card,
    "isbn": RuleBuilder.is_isbn,
    "isbn10": RuleBuilder.is_isbn10,
    "isbn13": RuleBuilder.is_isbn13,
    "email": RuleBuilder.email,
    "url": RuleBuilder.url,
    "phone": RuleBuilder.is_phone_number,
    "uuid": RuleBuilder.is_uuid,
    "ipv4": RuleBuilder.is_ipv4,
    "ipv6": RuleBuilder.is_ipv6,
    "ip": RuleBuilder.is_ip_address,
    "mac": RuleBuilder.is_mac_address,
    "bic": RuleBuilder.is_bic,
    "issn": RuleBuilder.is_issn,
    "base64": RuleBuilder.is_base64,
    "hex-color": RuleBuilder.is_hex_color,
}

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"fluentval version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """fluentval - Fluent, declarative rule validation for Python objects."""


def _configure_logging(config: FluentValConfig) -> None:
    level = _LOG_LEVELS[LogLevel(config.logging.level).value]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


class _ValueValidator(Validator):
    """Applies a single named rule to a raw command-line value."""

    def __init__(self, rule_name: str, config: FluentValConfig):
        super().__init__(config)
        CHECK_RULES[rule_name](self.rule_for("value", lambda value: value))


def default_message(rule_name: str) -> str:
    """Default failure message of a command-line rule."""
    chain = RuleBuilder("value", lambda value: value)
    CHECK_RULES[rule_name](chain)
    return chain.steps[-1].message


@app.command()
def check(
    rule: Annotated[
        str,
        typer.Argument(help="Rule to apply, see 'fluentval rules'")
    ],
    values: Annotated[
        list[str],
        typer.Argument(help="One or more values to check")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .fluentval.json)")
    ] = None,
) -> None:
    """Check values against a built-in rule."""
    valid_formats = ["table", "json"]

    if rule not in CHECK_RULES:
        console.print(f"[red]Error:[/red] Unknown rule '{rule}'. Must be one of: {', '.join(CHECK_RULES)}")
        raise typer.Exit(2)

    if format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(1)

    try:
        fluentval_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _configure_logging(fluentval_config)

    validator = _ValueValidator(rule, fluentval_config)
    results = [(value, validator.validate(value)) for value in values]
    all_valid = all(result.is_valid() for _, result in results)

    if format == "json":
        payload = {
            "rule": rule,
            "valid": all_valid,
            "results": [
                {"value": value, **result.to_dict()}
                for value, result in results
            ],
        }
        console.print(json.dumps(payload, indent=2), markup=False, highlight=False, emoji=False, soft_wrap=True)
    else:
        table = Table(title=f"Rule: {rule}")
        table.add_column("Value", style="cyan")
        table.add_column("Result", style="white")
        table.add_column("Message", style="dim")

        for value, result in results:
            if result.is_valid():
                table.add_row(escape(value), "[green]VALID[/green]", "")
            else:
                messages = "; ".join(error.message for error in result.errors)
                table.add_row(escape(value), "[red]INVALID[/red]", messages)

        console.print(table)
        invalid_count = sum(1 for _, result in results if result.is_not_valid())
        if invalid_count:
            console.print(f"[red]{invalid_count} of {len(results)} values invalid[/red]")
        else:
            console.print(f"[green]All {len(results)} values valid[/green]")

    raise typer.Exit(0 if all_valid else 1)


@app.command()
def rules() -> None:
    """List the rules accepted by 'check'."""
    table = Table(title="Available rules")
    table.add_column("Rule", style="cyan")
    table.add_column("Default message", style="white")

    for name in CHECK_RULES:
        table.add_row(name, default_message(name))

    console.print(table)


if __name__ == "__main__":
    app()
