"""
Command-line interface for docmerge.
"""

import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docmerge import __version__
from docmerge.classifier import DEFAULT_CLASSIFIER
from docmerge.config import QUALITY_TIERS
from docmerge.exceptions import DocMergeError, describe_failure
from docmerge.merger import merge_documents
from docmerge.sources import load_inputs
from docmerge.utils import sizeof_fmt

console = Console()

STATUS_STYLES = {"converted": "green", "failed": "red", "skipped": "yellow"}


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    docmerge - Merge PDFs, images and documents into a single PDF.
    """
    pass


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    '--output', '-o',
    default='merged.pdf',
    help='Output PDF path',
    type=click.Path(dir_okay=False)
)
@click.option(
    '--quality', '-q',
    default='medium',
    help='Image recompression quality',
    type=click.Choice(sorted(QUALITY_TIERS), case_sensitive=False)
)
@click.option(
    '--sort/--no-sort',
    default=False,
    help='Order all inputs naturally by name instead of as given'
)
@click.option(
    '--bookmarks',
    is_flag=True,
    help='Add a bookmark for each merged file'
)
@click.option(
    '--title', '-t',
    help='Title stored in the merged PDF',
    type=str
)
def merge(inputs, output, quality, sort, bookmarks, title):
    """
    Merge files and directories into one PDF.

    Directories are expanded to the supported files they contain, in
    natural order.

    Examples:

        docmerge merge cover.pdf notes.md scans/ -o report.pdf

        docmerge merge photos/ -q low --sort --bookmarks
    """
    try:
        batch = load_inputs(inputs, DEFAULT_CLASSIFIER, sort=sort)
        if not batch:
            console.print("[bold red]✗ Error:[/bold red] No supported files found.")
            sys.exit(1)

        console.print(f"\n[bold cyan]Merging {len(batch)} file(s)...[/bold cyan]")
        result = merge_documents(batch, quality=quality, bookmarks=bookmarks, title=title)

        with open(output, 'wb') as handle:
            handle.write(result.data)

        table = Table(title="Merged Files")
        table.add_column("#", justify="right", style="dim")
        table.add_column("File", style="cyan")
        table.add_column("Type")
        table.add_column("Pages", justify="right")
        table.add_column("Status")

        for index, outcome in enumerate(result.outcomes, start=1):
            style = STATUS_STYLES.get(outcome.status, "white")
            status = outcome.status if not outcome.error else f"{outcome.status}: {escape(outcome.error)}"
            table.add_row(
                str(index),
                escape(outcome.name),
                outcome.category.value,
                str(outcome.pages),
                f"[{style}]{status}[/{style}]",
            )

        console.print(table)
        console.print(
            f"\n[bold green]✓ Wrote {result.page_count} page(s) to[/bold green] {os.path.abspath(output)} "
            f"[dim]({sizeof_fmt(len(result.data))})[/dim]"
        )
        if result.failed:
            console.print(f"[yellow]{len(result.failed)} file(s) were replaced by error pages.[/yellow]")
        console.print()

    except DocMergeError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {describe_failure(e)}")
        sys.exit(1)
    except OSError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="formats")
def show_formats():
    """
    List the supported file extensions by category.
    """
    table = Table(title="Supported Formats")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Extensions", style="green")

    for category, extensions in DEFAULT_CLASSIFIER.supported_extensions().items():
        table.add_row(category.value, " ".join(extensions))

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
