"""
JSON output: one file per verse plus a metadata.json per edition.

Layout:
    <data_dir>/metadata.json
    <data_dir>/<book>/<chapter>/<verse>.json
"""
import json
from pathlib import Path

from .models import VerseRecord


EDITION_METADATA = {
    "abbreviation": "TR",
    "name": "Textus Receptus (Robinson)",
    "language": "Greek",
    "license": "Public Domain",
    "source": "byztxt",
    "urls": ["https://github.com/byztxt/greektext-textus-receptus"],
}


def save_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return path


def verse_path(data_dir: Path, record: VerseRecord) -> Path:
    return data_dir / record.book / str(record.chapter) / f"{record.verse}.json"


def save_verse(record: VerseRecord, data_dir: Path) -> Path:
    return save_json(verse_path(data_dir, record), record.to_dict())


def save_metadata(data_dir: Path, abbreviation: str = "TR") -> Path:
    metadata = dict(EDITION_METADATA, abbreviation=abbreviation)
    return save_json(data_dir / "metadata.json", metadata)


def load_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_metadata(data_dir: Path) -> dict:
    return load_json(data_dir / "metadata.json")


def load_verse(data_dir: Path, book: str, chapter: int, verse: int) -> dict | None:
    """Read back one verse record; None if it was never written."""
    path = data_dir / book / str(chapter) / f"{verse}.json"
    if not path.exists():
        return None
    return load_json(path)
