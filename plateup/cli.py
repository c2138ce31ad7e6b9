import json
from pathlib import Path

import click
from dotenv import load_dotenv

from .config import ARTICLES_DIR, OUTPUT_JSON, SOURCE_FILE
from .html_generator import ArticleHTMLGenerator
from .pipeline import run_pipeline
from .storage import SourceConfigError, load_existing_index, write_default_config

# Load environment variables
load_dotenv()


source_option = click.option(
    "--source",
    "-s",
    "source_path",
    envvar="PLATEUP_SOURCE",
    default=str(SOURCE_FILE),
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Source JSON file with domain and categories",
)
index_option = click.option(
    "--index",
    "-i",
    "index_path",
    envvar="PLATEUP_INDEX",
    default=str(OUTPUT_JSON),
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Articles index JSON file",
)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """PlateUp - Generate placeholder recipe articles and their index.

    Without a command, runs `generate` with the default paths.
    """
    if ctx.invoked_subcommand is None:
        with generate.make_context("generate", [], parent=ctx) as sub_ctx:
            generate.invoke(sub_ctx)


@cli.command()
@source_option
@index_option
@click.option(
    "--articles-dir",
    "-o",
    envvar="PLATEUP_ARTICLES_DIR",
    default=str(ARTICLES_DIR),
    show_default=True,
    type=click.Path(file_okay=False),
    help="Output directory for article HTML files",
)
@click.option(
    "--escape-html",
    is_flag=True,
    help="HTML-escape titles and content interpolated into pages",
)
def generate(source_path, index_path, articles_dir, escape_html):
    """Generate article pages for every new item in the source file."""

    html_generator = ArticleHTMLGenerator(escape_html=escape_html)

    try:
        result = run_pipeline(
            source_path, index_path, articles_dir, html_generator=html_generator
        )
    except SourceConfigError as e:
        raise click.ClickException(
            f"Failed to parse {Path(source_path).name}: {e}"
        ) from e

    click.echo("\n=== Summary ===")
    click.echo(f"  - Created: {len(result.created)} articles")
    click.echo(f"  - Skipped: {len(result.skipped)} articles (already exist)")
    click.echo(f"  - Total in index: {len(result.articles)} articles")
    click.echo("Done.")


@cli.command()
@source_option
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file")
def init(source_path, force):
    """Write the default source file."""

    path = Path(source_path)
    if path.exists() and not force:
        raise click.ClickException(f"{path} already exists (use --force to overwrite)")

    write_default_config(path)
    click.echo(f"✓ Wrote default source to: {path}")


@cli.command(name="list")
@index_option
@click.option("--category", "-c", help="Only show articles in this category")
@click.option("--json", "as_json", is_flag=True, help="Print records as JSON")
def list_articles(index_path, category, as_json):
    """List the articles recorded in the index."""

    records = [e for e in load_existing_index(index_path) if isinstance(e, dict)]
    if category:
        records = [r for r in records if r.get("category") == category]

    if as_json:
        click.echo(json.dumps(records, indent=2, ensure_ascii=False))
        return

    for record in records:
        click.echo(
            f"{record.get('slug', '')}  {record.get('title', '')}  ({record.get('category', '')})"
        )
    click.echo(f"\nTotal: {len(records)} articles")


if __name__ == "__main__":
    cli()
