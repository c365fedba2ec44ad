"""
Unified CLI for the Byztxt Toolkit.

Entry point: byztxt
"""
import json
from pathlib import Path

import click

from .config import ToolkitConfig


@click.group()
@click.option("--output-dir", type=click.Path(path_type=Path), default=None,
              help="Output directory (default: output/).")
@click.option("--source-dir", type=click.Path(path_type=Path), default=None,
              help="Download/extraction directory (default: source/).")
@click.option("--force", is_flag=True, default=False,
              help="Re-run even if the output already exists.")
@click.pass_context
def cli(ctx, output_dir, source_dir, force):
    """Byztxt Textus Receptus import toolkit."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ToolkitConfig.from_overrides(
        output_dir=output_dir, source_dir=source_dir)
    ctx.obj["force"] = force


@cli.command()
@click.option("--url", type=str, default=None,
              help="URL of the byztxt ZIP archive.")
@click.pass_context
def fetch(ctx, url):
    """Download the archive and extract the .UTR files."""
    from .fetch import ensure_source

    config = ctx.obj["config"]
    if url is not None:
        config.zip_url = url
    files = ensure_source(config, force=ctx.obj["force"])
    click.echo(f"  {len(files)} book files in {config.parsed_dir}")


@cli.command("import")
@click.pass_context
def import_(ctx):
    """Parse every book and write one JSON file per verse."""
    from .importer import run

    run(ctx.obj["config"], force=ctx.obj["force"])


@cli.command()
@click.argument("utr_file", type=click.Path(path_type=Path))
@click.option("--book", type=str, default=None,
              help="Book id used in the records (default: from file name).")
@click.option("--chapter", type=int, default=None, help="Only this chapter.")
@click.option("--verse", type=int, default=None, help="Only this verse.")
@click.pass_context
def parse(ctx, utr_file, book, chapter, verse):
    """Parse a single .UTR file and print its verse records as JSON."""
    from .assemble import assemble_book
    from .books import book_for_file

    if not utr_file.exists():
        raise click.ClickException(f"File not found: {utr_file}")

    config = ctx.obj["config"]
    book = book or book_for_file(utr_file) or utr_file.stem
    content = utr_file.read_text(encoding="utf-8-sig", errors="replace")
    records = assemble_book(book, content,
                            lemma_prefix=config.lemma_prefix,
                            morph_scheme=config.morph_scheme)

    selected = [
        {"book": r.book, "chapter": r.chapter, "verse": r.verse, **r.to_dict()}
        for r in records
        if (chapter is None or r.chapter == chapter)
        and (verse is None or r.verse == verse)
    ]
    click.echo(json.dumps(selected, ensure_ascii=False, indent=2))


@cli.command()
@click.argument("book")
@click.argument("chapter", type=int)
@click.argument("verse", type=int)
@click.pass_context
def show(ctx, book, chapter, verse):
    """Print an imported verse record (e.g. `show John 1 1`)."""
    from .writer import load_verse

    config = ctx.obj["config"]
    record = load_verse(config.data_dir, book, chapter, verse)
    if record is None:
        raise click.ClickException(
            f"{book} {chapter}:{verse} not found in {config.data_dir}\n"
            "  Run first: byztxt import"
        )
    click.echo(json.dumps(record, ensure_ascii=False, indent=2))


@cli.command()
@click.argument("text")
@click.option("--latin", is_flag=True, default=False,
              help="Input is in byztxt Latin encoding.")
def gematria(text, latin):
    """Compute standard, ordinal and reduced gematria of TEXT."""
    from .gematria import compute_greek
    from .transliterate import transliterate_to_greek

    greek = transliterate_to_greek(text) if latin else text
    values = compute_greek(greek)
    click.echo(f"  {greek}")
    for method, value in values.items():
        click.echo(f"    {method:8s} {value}")


def main():
    cli()
