"""
Command-line interface for ExpatOS.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from expatos.config import configure_logging, get_settings


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug mode")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """ExpatOS: document dependency analysis for UAE residents."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    configure_logging(logging.DEBUG if debug else get_settings().log_level)


def _print_analysis(analysis, documents, as_json: bool) -> None:
    """Render an analysis as JSON or as a readable report."""
    from expatos.analysis.action_plan import build_action_plan
    from expatos.analysis.overview import health_label

    if as_json:
        click.echo(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
        return

    label = health_label(analysis.health_score)
    click.echo(f"Documents analyzed: {len(documents)}")
    click.echo(f"Health Score: {analysis.health_score}/100 ({label.label})")

    if analysis.dependencies:
        click.echo("\nDependencies:")
        for edge in analysis.dependencies:
            click.echo(f"  [{edge.status.value:>7}] {edge.parent} -> {edge.requires}: {edge.reason}")

    if analysis.critical_alerts:
        click.echo("\nAlerts:")
        for alert in analysis.critical_alerts:
            click.echo(f"  [{alert.severity.value}] {alert.title}")
            click.echo(f"      {alert.action_required} (deadline: {alert.deadline})")

    plan = build_action_plan(analysis)
    if plan:
        click.echo("\nAction Plan:")
        for i, item in enumerate(plan, 1):
            click.echo(f"  {i}. {item.title} [{item.priority.value}] - {item.deadline}")


# =========================================================================
# Server Commands
# =========================================================================


@cli.command()
@click.option("--host", default=None, help="Host to bind to")
@click.option("--port", default=None, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload")
def serve(host: Optional[str], port: Optional[int], reload: bool) -> None:
    """Start the API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    click.echo(f"Starting ExpatOS API server on {host}:{port}")

    uvicorn.run(
        "expatos.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


# =========================================================================
# Analysis Commands
# =========================================================================


@cli.command()
@click.argument("documents_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--as-of", type=click.DateTime(formats=["%Y-%m-%d"]), help="Reference date (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Print the analysis as JSON")
def analyze(documents_path: str, as_of: Optional[datetime], as_json: bool) -> None:
    """Analyze documents from a JSON file."""
    from pydantic import ValidationError

    from expatos.analysis.analyzer import DependencyAnalyzer, index_documents
    from expatos.analysis.dates import utc_now
    from expatos.services.document_store import load_json

    try:
        documents = load_json(Path(documents_path))
        if get_settings().reject_duplicate_types:
            index_documents(documents, reject_duplicates=True)
    except (ValidationError, ValueError) as e:
        raise click.ClickException(str(e))

    now = as_of.date() if as_of else utc_now()
    analysis = DependencyAnalyzer().analyze(documents, now=now)
    _print_analysis(analysis, documents, as_json)


@cli.command()
@click.option("--as-of", type=click.DateTime(formats=["%Y-%m-%d"]), help="Reference date (YYYY-MM-DD)")
@click.option("--json", "as_json", is_flag=True, help="Print the analysis as JSON")
def demo(as_of: Optional[datetime], as_json: bool) -> None:
    """Analyze the built-in demo profile."""
    from expatos.analysis.analyzer import DependencyAnalyzer
    from expatos.analysis.dates import to_date, utc_now
    from expatos.services.document_store import demo_documents

    today = as_of.date() if as_of else to_date(utc_now())
    documents = demo_documents(today)
    analysis = DependencyAnalyzer().analyze(documents, now=today)
    _print_analysis(analysis, documents, as_json)


def main() -> None:
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
