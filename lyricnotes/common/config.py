"""Folder configuration for note generation.

A lyrics folder can have a -config.json file that specifies:
- output_dir: where the CSV files go, relative to the lyrics folder (default: ".")
- extensions: file extensions treated as songs (default: ["txt"])
- workers: number of songs processed in parallel (default: 1)
- max_window: cap on the prompt context size (default: null, no cap)

Command-line flags override the file.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from lyricnotes.common.logging import DEFAULT_PARALLEL_WORKERS


CONFIG_FILENAME = "-config.json"


@dataclass
class FolderConfig:
    """Configuration for a lyrics folder."""
    output_dir: str = "."
    extensions: List[str] = field(default_factory=lambda: ["txt"])
    workers: int = DEFAULT_PARALLEL_WORKERS
    max_window: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.extensions, str):
            self.extensions = [self.extensions]
        if not isinstance(self.extensions, list) or not all(isinstance(ext, str) for ext in self.extensions):
            raise ValueError(f"extensions must be a list of strings, got {self.extensions!r}")
        self.extensions = [ext.strip().lstrip(".").lower() for ext in self.extensions if ext.strip()]
        if not self.extensions:
            raise ValueError("extensions must name at least one file extension")
        if not isinstance(self.workers, int) or self.workers < 1:
            raise ValueError(f"workers must be a positive integer, got {self.workers!r}")
        if self.max_window is not None and (not isinstance(self.max_window, int) or self.max_window < 1):
            raise ValueError(f"max_window must be a positive integer or null, got {self.max_window!r}")


def load_folder_config(folder: Path) -> FolderConfig:
    """Load configuration from a folder's -config.json file.

    Returns the defaults if the config file doesn't exist.
    """
    config_path = folder / CONFIG_FILENAME
    if not config_path.exists():
        return FolderConfig()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{CONFIG_FILENAME} must contain a JSON object")

    return FolderConfig(
        output_dir=data.get("output_dir", "."),
        extensions=data.get("extensions", ["txt"]),
        workers=data.get("workers", DEFAULT_PARALLEL_WORKERS),
        max_window=data.get("max_window", None),
    )


def get_output_dir(config_folder: Path, config: FolderConfig) -> Path:
    """Get the resolved output directory path from config."""
    return (config_folder / config.output_dir).resolve()
