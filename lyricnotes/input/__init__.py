"""Input processing: reading lyric files into songs."""

from lyricnotes.input.lyrics import (
    EmptySongError,
    Song,
    parse_lyrics_text,
    list_song_files,
    read_song,
)

__all__ = [
    "EmptySongError",
    "Song",
    "parse_lyrics_text",
    "list_song_files",
    "read_song",
]
