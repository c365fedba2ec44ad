"""
Full import: byztxt .UTR files → one JSON record per verse.

Output:
  - <output_dir>/byztxt-TR/<book>/<chapter>/<verse>.json
  - <output_dir>/byztxt-TR/metadata.json
"""
from pathlib import Path

import click
from tqdm import tqdm

from .assemble import assemble_book
from .books import book_for_file
from .config import ToolkitConfig
from .fetch import ensure_source
from .utils import print_header, print_step, timer
from .writer import save_metadata, save_verse


def import_file(path: Path, book: str, config: ToolkitConfig) -> int:
    """Import one book file; returns the number of verses written."""
    content = path.read_text(encoding="utf-8-sig", errors="replace")
    records = assemble_book(book, content,
                            lemma_prefix=config.lemma_prefix,
                            morph_scheme=config.morph_scheme)
    for record in records:
        save_verse(record, config.data_dir)
    return len(records)


@timer
def import_books(files: list[Path], config: ToolkitConfig) -> dict:
    """Import every known book; unknown file names are skipped."""
    counts = {}
    for path in tqdm(files, desc="  Importing books", unit="book"):
        book = book_for_file(path)
        if book is None:
            continue
        counts[book] = import_file(path, book, config)
    return counts


def run(config: ToolkitConfig, force=False, **kwargs):
    """Download (if needed), parse and write the whole edition."""
    metadata_path = config.data_dir / "metadata.json"
    if metadata_path.exists() and not force:
        click.echo("  Import already done. Use --force to re-run.")
        return

    config.ensure_dirs()
    print_header("BYZTXT IMPORT — Textus Receptus (Robinson)")

    files = ensure_source(config, force=force)

    print_step(f"Processing {len(files)} books...")
    counts = import_books(files, config)

    print_step("Saving metadata...")
    save_metadata(config.data_dir, abbreviation=config.abbreviation)

    total = sum(counts.values())
    click.echo(f"\n  Imported {total} verses from {len(counts)} books "
               f"to {config.data_dir}")
    return counts
