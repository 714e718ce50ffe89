# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for refreshing the dataset and browsing or sampling breeds

import json as jsonlib
from pathlib import Path

import asyncclick as click
import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from dog_breeds.catalog import load_catalog
from dog_breeds.config import get_config
from dog_breeds.core.pipeline import BreedUpdatePipeline
from dog_breeds.extraction.base import ExtractionError
from dog_breeds.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from dog_breeds.utils.retry import run_with_retries
from dog_breeds.utils.rich_tables import (
    create_breeds_table,
    create_logging_status_table,
    create_update_summary_table,
    print_rich_table,
)

console = Console()

# Failures that end an update run: transport and HTTP status errors, or responses of the wrong shape
UPDATE_FAILURES = (httpx.HTTPError, ExtractionError, KeyError, TypeError, ValidationError)


@click.command()
@click.option(
    "--output", "-o", "output_path", type=click.Path(dir_okay=False, path_type=Path), help="Write the dataset here"
)
@click.option("--attempts", default=1, show_default=True, type=click.IntRange(min=1), help="Total runs to try")
@click.pass_context
async def update(ctx, output_path: Path | None, attempts: int):
    """
    🔄 Rebuild dog-breeds.json from Wikipedia and Wikidata.

    Fetches the breed list and Wikidata metadata, resolves Wikipedia
    redirects, merges everything and overwrites the dataset.
    """
    json_output = ctx.obj["json_output"]

    with with_pipeline_context("breed_update_cli", attempts=attempts) as logger:
        pipeline = BreedUpdatePipeline(output_path=output_path)
        try:
            if json_output:
                records = await run_with_retries(pipeline.run, max_attempts=attempts)
            else:
                console.print(Panel.fit("🐕 [bold cyan]Dog Breeds Update[/bold cyan] 🐕", border_style="magenta"))
                with console.status("Fetching Wikipedia and Wikidata...", spinner="dots"):
                    records = await run_with_retries(pipeline.run, max_attempts=attempts)
        except UPDATE_FAILURES as e:
            logger.error("Dataset update failed", error=str(e), error_type=type(e).__name__)
            if not json_output:
                console.print(f"[red]❌ Update failed: {e}[/red]")
            ctx.exit(1)
        finally:
            await pipeline.close()

    if json_output:
        report = pipeline.report
        click.echo(
            jsonlib.dumps(
                {
                    "breed_count": len(records),
                    "output_path": str(pipeline.output_path),
                    "unmatched": report.unmatched if report else [],
                }
            )
        )
        return

    print_rich_table(console, create_update_summary_table(records, pipeline.report, pipeline.output_path))


@click.command(name="list")
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Only show the first N breeds")
@click.option("--dataset", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Dataset to read")
@click.pass_context
def list_breeds(ctx, limit: int | None, dataset: Path | None):
    """
    📜 List breeds in alphabetical order.
    """
    catalog = load_catalog(dataset or get_config().output_path)
    records = catalog.all[:limit] if limit else catalog.all

    if ctx.obj["json_output"]:
        click.echo(jsonlib.dumps([record.to_document() for record in records], indent=2, ensure_ascii=False))
        return

    print_rich_table(console, create_breeds_table(records, title=f"🐕 Dog Breeds ({len(catalog)} total)"))


@click.command(name="random")
@click.option("--count", "-c", default=1, show_default=True, type=click.IntRange(min=1), help="Number of picks")
@click.option("--dataset", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Dataset to read")
@click.pass_context
def random_breeds(ctx, count: int, dataset: Path | None):
    """
    🎲 Pick random breeds, never the same one twice in a row.
    """
    catalog = load_catalog(dataset or get_config().output_path)
    picks = [catalog.random() for _ in range(count)]

    if ctx.obj["json_output"]:
        for record in picks:
            click.echo(jsonlib.dumps(record.to_document(), ensure_ascii=False))
        return

    print_rich_table(console, create_breeds_table(picks, title="🎲 Random Breeds"))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🐕 Dog Breeds - dataset of dog breeds from Wikipedia and Wikidata

    Keep dog-breeds.json up to date and browse or sample the breeds in it.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(update)
app.add_command(list_breeds)
app.add_command(random_breeds)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
