"""CLI interface for inspecting content blocker lists."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from contentblock.config import BlockerSettings, RulesSettings, get_settings, set_settings
from contentblock.formatters import format_as_json, format_rule_set_as_json
from contentblock.models.request import (
    HideMatchingElements,
    LoadType,
    Reaction,
    Request,
    ResourceType,
)
from contentblock.rules import RuleEngine, RuleListError
from contentblock.rules_factory import build_rule_engine, describe_rule

console = Console()


def setup_logging(log_level: str) -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _build_engine_or_exit() -> RuleEngine:
    """Build the rule engine from the global settings, exiting on fatal errors."""
    settings = get_settings()
    try:
        return build_rule_engine(settings)
    except (FileNotFoundError, RuleListError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        sys.exit(1)


def _format_reaction(reaction: Reaction) -> str:
    """Format a reaction for console output."""
    if isinstance(reaction, HideMatchingElements):
        return f"{reaction.kind} [dim]{escape(reaction.selector)}[/dim]"
    return reaction.kind


def display_reactions(request: Request, reactions: list[Reaction]) -> None:
    """Display the reactions decided for a request."""
    console.print(f"\nRequest: [cyan]{escape(str(request))}[/cyan]")
    if not reactions:
        console.print("[green]No reactions - request proceeds unmodified.[/green]\n")
        return

    console.print(f"[bold]{len(reactions)} reaction(s):[/bold]")
    for reaction in reactions:
        console.print(f"  [red]•[/red] {_format_reaction(reaction)}")
    console.print()


def display_rules_table(engine: RuleEngine) -> None:
    """Display loaded rules in list order."""
    if not engine.rules:
        console.print("\n[yellow]No rules loaded.[/yellow]\n")
        return

    table = Table(title="\n[bold cyan]Rules[/bold cyan]", show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Rule")
    for index, rule in enumerate(engine.rules):
        table.add_row(str(index), escape(describe_rule(rule)))
    console.print(table)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level",
)
@click.option(
    "--rules-file",
    type=click.Path(path_type=Path),
    default=None,
    help="JSON content blocker list (default: $RULES_RULES_FILE)",
)
def main(log_level: str, rules_file: Path | None) -> None:
    """Evaluate requests against a content blocker list."""
    setup_logging(log_level.upper())

    if rules_file is not None:
        set_settings(BlockerSettings(rules=RulesSettings(rules_file=str(rules_file))))


@main.command()
@click.argument("url")
@click.option(
    "--resource-type",
    type=click.Choice([t.value for t in ResourceType]),
    default=ResourceType.DOCUMENT.value,
    help="Resource type of the request (default: document)",
)
@click.option(
    "--load-type",
    type=click.Choice([t.value for t in LoadType]),
    default=LoadType.FIRST_PARTY.value,
    help="Load type of the request (default: first-party)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default="console",
    help="Output format (default: console)",
)
def check(url: str, resource_type: str, load_type: str, output_format: str) -> None:
    """Show the reactions the rule list decides for URL."""
    engine = _build_engine_or_exit()
    request = Request(
        url=url,
        resource_type=ResourceType(resource_type),
        load_type=LoadType(load_type),
    )
    reactions = engine.evaluate(request)

    if output_format.lower() == "json":
        print(format_as_json(request, reactions))
    else:
        display_reactions(request, reactions)


@main.command("list-rules")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default="console",
    help="Output format (default: console)",
)
def list_rules(output_format: str) -> None:
    """List the rules that survived loading."""
    engine = _build_engine_or_exit()
    if output_format.lower() == "json":
        print(format_rule_set_as_json(engine.rules))
    else:
        display_rules_table(engine)


if __name__ == "__main__":
    main()
