"""Two-column CSV output for rendered cards.

Rows are ``front,back`` with no header. A field is wrapped in double quotes
(inner quotes doubled) only when it contains a comma, a double quote, a line
break, or leading/trailing whitespace.
"""

import os
import tempfile
from pathlib import Path
from typing import Iterable, Sequence

from lyricnotes.output.cards import Card


def _has_line_break(value: str) -> bool:
    return value.splitlines() != [value]


def quote_csv_field(value: str) -> str:
    """Quote a CSV field if needed."""
    if not value:
        return value

    needs_quotes = (
        "," in value
        or '"' in value
        or value[0].isspace()
        or value[-1].isspace()
        or _has_line_break(value)
    )
    if needs_quotes:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_csv_row(fields: Sequence[str]) -> str:
    """Format one row (without line terminator)."""
    return ",".join(quote_csv_field(f) for f in fields)


def format_csv(cards: Iterable[Card]) -> str:
    """Format cards as CSV text, one row per card."""
    rows = [format_csv_row((card.front, card.back)) for card in cards]
    return "\n".join(rows) + "\n" if rows else ""


def write_text_atomically(path: Path, text: str) -> None:
    """Write text to path so readers never see a partially written file.

    The content goes to a temporary file in the same directory, which then
    replaces the destination.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def write_cards_csv(path: Path, cards: Sequence[Card]) -> Path:
    """Write a song's cards to a CSV file atomically."""
    write_text_atomically(path, format_csv(cards))
    return path
