"""Note derivation: turning a song's lines into prompt/answer pairs."""

from lyricnotes.notes.derive import (
    START_MARKER,
    END_MARKER,
    Note,
    AnnotatedNote,
    augment_lines,
    window_ending_at,
    window_is_unique,
    shortest_unique_window_size,
    unique_notes,
    derive_notes,
    annotate_ambiguity,
    notes_for_lyrics,
)

__all__ = [
    "START_MARKER",
    "END_MARKER",
    "Note",
    "AnnotatedNote",
    "augment_lines",
    "window_ending_at",
    "window_is_unique",
    "shortest_unique_window_size",
    "unique_notes",
    "derive_notes",
    "annotate_ambiguity",
    "notes_for_lyrics",
]
