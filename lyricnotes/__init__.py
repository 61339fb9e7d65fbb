"""Lyrics-to-flashcard note generation library.

Subpackages:
- lyricnotes.common: Shared utilities (utils, logging, config)
- lyricnotes.input: Reading lyric files into songs
- lyricnotes.notes: Deriving prompt/answer notes from a song's lines
- lyricnotes.output: Rendering cards and writing CSV files
"""
