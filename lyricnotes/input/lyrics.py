"""Lyrics input parsing.

Simple input parsing, one song per file:
- Song title is the file name without its extension
- Blank lines are dropped and every other line is stripped
- Files starting with "." are ignored, as are subdirectories
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from lyricnotes.notes.derive import augment_lines


class EmptySongError(ValueError):
    """Raised when a lyrics file has no usable lines."""

    def __init__(self, path: Path):
        super().__init__(f"no lyrics found in {path.name}")
        self.path = path


@dataclass
class Song:
    """A song's title and its lyric lines, in order."""
    title: str
    lyrics: List[str]
    source: Optional[Path] = None

    @property
    def lines(self) -> List[str]:
        """Lyric lines bracketed by the start and end sentinels."""
        return augment_lines(self.lyrics)


def parse_lyrics_text(text: str) -> List[str]:
    """Parse raw lyrics text into a list of lines.

    Args:
        text: Raw file content

    Returns:
        Stripped, non-empty lines in file order
    """
    lines: List[str] = []

    for line in text.split("\n"):
        line = line.strip()
        if line:
            lines.append(line)

    return lines


def list_song_files(directory: Path, extensions: Iterable[str] = ("txt",)) -> List[Path]:
    """List the lyrics files in a directory, sorted by name.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        NotADirectoryError: If the path isn't a directory.
    """
    if not directory.exists():
        raise FileNotFoundError(f"Source directory does not exist: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Source path is not a directory: {directory}")

    wanted = {ext.lstrip(".").lower() for ext in extensions}
    files = [
        p for p in directory.iterdir()
        if p.is_file()
        and not p.name.startswith(".")
        and p.suffix.lstrip(".").lower() in wanted
    ]
    return sorted(files, key=lambda p: p.name)


def read_song(path: Path) -> Song:
    """Read one lyrics file.

    Raises:
        EmptySongError: If the file has no non-blank lines.
        OSError, UnicodeDecodeError: If the file can't be read as UTF-8 text.
    """
    text = path.read_text(encoding="utf-8")
    lyrics = parse_lyrics_text(text)
    if not lyrics:
        raise EmptySongError(path)
    return Song(title=path.stem, lyrics=lyrics, source=path)
