"""CLI interface for web-inspector."""

import json
import sys
from collections import Counter

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from . import __version__
from .auditor import analyze_website, normalize_url
from .config import get_settings
from .errors import InvalidInputError
from .evidence import round_half_up
from .log import configure_logging
from .models import AnalysisResult, Severity, Violation
from .rules import RULE_SOURCES, RULES, select_rules


console = Console()

COMMANDS = ["scan", "sources", "rules", "serve"]


def severity_style(severity: Severity) -> str:
    """Get Rich style for severity level."""
    return {
        Severity.INFO: "blue",
        Severity.WARNING: "yellow",
        Severity.ERROR: "red",
    }.get(severity, "white")


def severity_icon(severity: Severity) -> str:
    """Get icon for severity level."""
    return {
        Severity.INFO: "ℹ",
        Severity.WARNING: "⚠",
        Severity.ERROR: "✗",
    }.get(severity, "•")


SCORE_BANDS = ((80, "green"), (60, "yellow"), (40, "orange1"), (0, "red"))


def score_color(score: int) -> str:
    return next(color for floor, color in SCORE_BANDS if score >= floor)


def score_bar(result: AnalysisResult, width: int = 25) -> Text:
    """Score bar followed by the passed and checked rule counts."""
    score = result.overall_score
    color = score_color(score)
    filled = round_half_up(score * width / 100)

    bar = Text("█" * filled, style=color)
    bar.append("░" * (width - filled), style="dim")
    bar.append(f" {score}/100", style=f"bold {color}")
    bar.append(f"  {result.summary.passed_rules} of {result.summary.total_rules} rules passed", style="dim")
    return bar


def print_violation(violation: Violation, verbose: bool) -> None:
    icon = severity_icon(violation.severity)
    style = severity_style(violation.severity)
    console.print(f"  [{style}]{icon}[/] [bold]{violation.rule_name}[/bold] [dim]({violation.id})[/dim]")
    console.print(f"    {violation.details}", markup=False, highlight=False, style="dim")
    if verbose:
        if violation.source:
            console.print(f"    [dim]Source: {violation.source}[/dim]")
        if violation.code_snippet:
            console.print(f"    [dim]Line {violation.line_number}:[/dim]")
            for line in violation.code_snippet.splitlines():
                console.print(f"      {line}", markup=False, highlight=False, style="dim")
    console.print(f"    [cyan]→[/cyan] {violation.recommendation}", highlight=False)


def print_result(result: AnalysisResult, verbose: bool = False) -> None:
    """Print analysis result to console."""
    summary = result.summary

    # Header
    console.print()
    console.print(Panel(
        f"[bold]{result.site_name}[/bold]\n"
        f"[dim]{result.site_url} • {result.analyzed_at}[/dim]",
        title="🔍 Web Inspector",
        border_style="blue"
    ))

    # Overall score
    console.print()
    console.print("  Score: ", end="")
    console.print(score_bar(result))
    console.print()

    # Summary table
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Rules", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Checked", str(summary.total_rules))
    table.add_row("Passed", f"[green]{summary.passed_rules}[/green]")
    table.add_row("Errors", f"[red]{summary.failed_rules}[/red]")
    table.add_row("Warnings", f"[yellow]{summary.warning_rules}[/yellow]")
    table.add_row("Info", f"[blue]{summary.info_rules}[/blue]")
    console.print(table)

    # Violations (verbose mode shows all, otherwise just errors/warnings)
    if verbose:
        shown = result.violations
    else:
        shown = [v for v in result.violations if v.severity in (Severity.ERROR, Severity.WARNING)]

    if shown:
        console.print("\n[bold]Issues Found:[/bold]\n")
        for violation in shown:
            print_violation(violation, verbose)
        hidden = len(result.violations) - len(shown)
        if hidden:
            console.print(f"\n  [dim]+ {hidden} info-level issue(s); use --verbose to show them[/dim]")

    if result.recommendations:
        console.print("\n[bold]🎯 Top Recommendations:[/bold]\n")
        for i, line in enumerate(result.recommendations, 1):
            console.print(f"  {i}. {line}")

    # Footer
    console.print()
    console.print("[dim]─" * 50 + "[/dim]")
    console.print(f"[dim]web-inspector v{__version__}[/dim]")
    console.print()


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__)
def cli(ctx):
    """Web Inspector - check a web page against best-practice rules.

    \b
    Quick start:
        web-inspector scan example.com
        web-inspector scan example.com --source wcag

    \b
    Commands:
        scan     Analyze a URL
        sources  List rule sources
        rules    List catalog rules
        serve    Run the HTTP API
    """
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("url")
@click.option("-s", "--source", "source_filter", default="all", show_default=True,
              help="Rule source id or filter token (e.g. wcag, seo, OWASP)")
@click.option("-v", "--verbose", is_flag=True, help="Show all violations with details and code snippets")
@click.option("-t", "--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
def scan(url: str, source_filter: str, verbose: bool, timeout, json_output: bool):
    """Analyze a URL against the rule catalog.

    \b
    Examples:
        web-inspector scan example.com
        web-inspector scan example.com --source security --verbose
        web-inspector scan example.com --json
    """
    settings = get_settings()
    if timeout is not None:
        settings = settings.model_copy(update={"timeout": timeout})

    url = normalize_url(url)
    try:
        if json_output:
            result = analyze_website(url, source_filter, settings=settings)
        else:
            with console.status(f"[bold blue]Scanning {url}...[/bold blue]"):
                result = analyze_website(url, source_filter, settings=settings)
    except InvalidInputError as e:
        console.print(f"\n[red]Error:[/red] {e}")
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_result(result, verbose=verbose)


@cli.command()
def sources():
    """List the rule sources usable with --source."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Organization", style="dim")
    table.add_column("Rules", justify="right")

    for source in RULE_SOURCES:
        table.add_row(source.id, source.name, source.organization, str(len(source.select(RULES))))

    console.print(table)


@cli.command()
@click.option("-s", "--source", "source_filter", default="all", show_default=True,
              help="Rule source id or filter token")
def rules(source_filter: str):
    """List catalog rules selected by a filter token."""
    selected = select_rules(source_filter)
    if not selected:
        console.print(f"[yellow]No rules match {source_filter!r}[/yellow]")
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Severity")
    table.add_column("Name")
    table.add_column("Category", style="dim")

    for rule in selected:
        style = severity_style(rule.severity)
        table.add_row(rule.id, f"[{style}]{rule.severity.value}[/]", rule.name, rule.category)

    console.print(table)

    by_category = Counter(rule.category for rule in selected)
    console.print(f"[dim]{len(selected)} rules in {len(by_category)} categories[/dim]")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=8000, show_default=True, type=int, help="Port to listen on")
def serve(host: str, port: int):
    """Run the HTTP API (POST /api/analyze, GET /api/sources)."""
    import uvicorn

    uvicorn.run("web_inspector.web:app", host=host, port=port, log_config=None)


# Convenience: allow `web-inspector URL` as shortcut for `web-inspector scan URL`
def main():
    """Entry point that handles both `web-inspector URL` and `web-inspector scan URL`."""
    args = sys.argv[1:]

    # If first arg looks like a URL (not a command), insert 'scan'
    if args and not args[0].startswith('-') and args[0] not in COMMANDS:
        # Check if it looks like a URL/domain
        if '.' in args[0] or args[0].startswith('localhost'):
            sys.argv.insert(1, 'scan')

    cli()


if __name__ == "__main__":
    main()
