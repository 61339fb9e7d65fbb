"""Output generation: rendering cards and writing CSV files."""

from lyricnotes.output.cards import (
    Card,
    ambiguity_marker,
    render_front,
    render_back,
    render_card,
    render_song_cards,
)
from lyricnotes.output.csv_rows import (
    quote_csv_field,
    format_csv_row,
    format_csv,
    write_text_atomically,
    write_cards_csv,
)
from lyricnotes.output.processing import (
    SongProcessingError,
    csv_path_for,
    check_csv_collisions,
    process_song_file,
    process_folder,
)

__all__ = [
    # cards
    "Card",
    "ambiguity_marker",
    "render_front",
    "render_back",
    "render_card",
    "render_song_cards",
    # csv
    "quote_csv_field",
    "format_csv_row",
    "format_csv",
    "write_text_atomically",
    "write_cards_csv",
    # processing
    "SongProcessingError",
    "csv_path_for",
    "check_csv_collisions",
    "process_song_file",
    "process_folder",
]
