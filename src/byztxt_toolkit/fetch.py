"""
Download the byztxt Textus Receptus archive and extract the .UTR files.
"""
import zipfile
from pathlib import Path

import click
import requests

from .config import ToolkitConfig
from .utils import print_step, timer


USER_AGENT = "byztxt-toolkit/0.1.0"


@timer
def download_archive(url: str, dest: Path, force: bool = False) -> Path:
    """Download the ZIP archive to `dest` unless it is already there."""
    if dest.exists() and not force:
        click.echo(f"    Archive already downloaded: {dest}")
        return dest

    dest.parent.mkdir(parents=True, exist_ok=True)
    click.echo(f"    Downloading {url}...")
    try:
        response = requests.get(url, headers={"User-Agent": USER_AGENT},
                                timeout=60)
        response.raise_for_status()
    except requests.RequestException as e:
        raise click.ClickException(f"Failed to download {url}: {e}")

    dest.write_bytes(response.content)
    click.echo(f"    Saved: {dest} ({len(response.content)} bytes)")
    return dest


@timer
def extract_utr_files(zip_path: Path, parsed_dir: Path) -> list[Path]:
    """Copy the `parsed/*.UTR` entries of the archive into `parsed_dir`.

    Directory structure inside the archive is flattened.
    """
    parsed_dir.mkdir(parents=True, exist_ok=True)
    extracted = []
    with zipfile.ZipFile(zip_path) as zf:
        for info in zf.infolist():
            name = info.filename
            if info.is_dir() or "/parsed/" not in name:
                continue
            if not name.endswith(".UTR"):
                continue
            target = parsed_dir / name.rsplit("/", 1)[-1]
            target.write_bytes(zf.read(info))
            extracted.append(target)
    click.echo(f"    Extracted {len(extracted)} .UTR files")
    return sorted(extracted)


def cached_utr_files(parsed_dir: Path) -> list[Path]:
    if not parsed_dir.is_dir():
        return []
    return sorted(parsed_dir.glob("*.UTR"))


def ensure_source(config: ToolkitConfig, force: bool = False) -> list[Path]:
    """Return the book files, downloading and extracting them if needed."""
    cached = cached_utr_files(config.parsed_dir)
    if cached and not force:
        print_step(f"Using cached source files ({len(cached)} books)")
        return cached

    print_step("Downloading byztxt archive...")
    download_archive(config.zip_url, config.zip_path, force=force)

    print_step("Extracting .UTR files...")
    files = extract_utr_files(config.zip_path, config.parsed_dir)
    if not files:
        raise click.ClickException(
            f"No .UTR files found in {config.zip_path}"
        )
    return files
