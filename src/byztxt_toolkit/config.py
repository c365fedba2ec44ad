"""
Byztxt Toolkit - global configuration as a dataclass.
"""
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ToolkitConfig:
    """Configuration shared by every step of the toolkit."""

    # === PATHS ===
    output_dir: Path = Path("output")
    source_dir: Path = Path("source")

    # === SOURCE ===
    zip_url: str = (
        "https://codeload.github.com/byztxt/"
        "greektext-textus-receptus/zip/refs/heads/master"
    )
    abbreviation: str = "TR"

    # === ANNOTATION NAMESPACES ===
    lemma_prefix: str = "G"
    morph_scheme: str = "robinson"

    # --- Derived paths ---

    @property
    def parsed_dir(self) -> Path:
        return self.source_dir / "parsed"

    @property
    def zip_path(self) -> Path:
        return self.source_dir / "byztxt.zip"

    @property
    def data_dir(self) -> Path:
        return self.output_dir / f"byztxt-{self.abbreviation}"

    def ensure_dirs(self) -> None:
        """Create every directory the pipeline writes to."""
        for d in [self.source_dir, self.parsed_dir, self.data_dir]:
            d.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_overrides(cls, **kwargs) -> "ToolkitConfig":
        """Build a config ignoring None values (for Click integration)."""
        filtered = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**filtered)
