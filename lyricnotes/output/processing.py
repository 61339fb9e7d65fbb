"""Folder processing: lyrics files in, one CSV of cards per song out.

Each song is read, turned into notes, rendered and written on its own, so
songs can be handed to parallel workers. A song's CSV is written atomically;
a failure stops the run but never leaves a half-written CSV behind.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from lyricnotes.common.config import FolderConfig, get_output_dir
from lyricnotes.common.logging import log_debug, log_info, set_thread_log_context
from lyricnotes.common.utils import sanitize_filename
from lyricnotes.input.lyrics import EmptySongError, list_song_files, read_song
from lyricnotes.notes.derive import notes_for_lyrics
from lyricnotes.output.cards import render_song_cards
from lyricnotes.output.csv_rows import write_cards_csv


class SongProcessingError(Exception):
    """Raised when a song can't be turned into a CSV file."""

    def __init__(self, path: Path, cause: BaseException):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


def csv_path_for(output_dir: Path, title: str) -> Path:
    """Get the CSV path for a song title."""
    return output_dir / f"{sanitize_filename(title)}.csv"


def check_csv_collisions(song_files: List[Path], output_dir: Path) -> None:
    """Make sure no two lyrics files would write the same CSV.

    Names are compared case-insensitively, since "Song.csv" and "song.csv"
    are the same file on some filesystems.

    Raises:
        SongProcessingError: Naming the second file and the one it collides with.
    """
    claimed: Dict[str, Path] = {}
    for path in song_files:
        csv_name = csv_path_for(output_dir, path.stem).name
        key = csv_name.casefold()
        first = claimed.get(key)
        if first is not None:
            raise SongProcessingError(
                path, ValueError(f"{path.name} and {first.name} would both be written to {csv_name}")
            )
        claimed[key] = path


def process_song_file(
    path: Path,
    output_dir: Path,
    max_window: Optional[int] = None,
    verbose: bool = False,
    debug: bool = False,
) -> Tuple[int, int]:
    """Process a single lyrics file.

    Returns (songs_written, cards_written) tuple.

    Raises:
        SongProcessingError: If the file can't be read, its lines are
            malformed, or the CSV can't be written.
    """
    set_thread_log_context(path.stem)
    try:
        song = read_song(path)
    except EmptySongError:
        log_info(verbose, "skip", f'Skipping song "{path.stem}" (no lyrics found)')
        return 0, 0
    except (OSError, UnicodeDecodeError) as e:
        raise SongProcessingError(path, e) from e

    log_debug(debug, f"{song.title}: {len(song.lyrics)} lines")

    try:
        notes = notes_for_lyrics(song.lyrics, max_window=max_window)
    except ValueError as e:
        raise SongProcessingError(path, e) from e

    ambiguous = sum(1 for n in notes if n.is_ambiguous)
    log_info(verbose, "notes", f"{song.title}: {len(notes)} notes ({ambiguous} ambiguous)")
    for annotated in notes:
        log_debug(debug, f"{list(annotated.note.prompt)} -> {annotated.note.answer!r} rank={annotated.rank}")

    cards = render_song_cards(song, notes)
    csv_path = csv_path_for(output_dir, song.title)
    try:
        write_cards_csv(csv_path, cards)
    except OSError as e:
        raise SongProcessingError(path, e) from e

    log_info(verbose, "file", f"Wrote {csv_path.name} ({len(cards)} cards)")
    return 1, len(cards)


def process_folder(
    source_dir: Path,
    config: FolderConfig,
    verbose: bool = False,
    debug: bool = False,
) -> Tuple[int, int]:
    """Process every lyrics file in a folder.

    Returns (songs_written, cards_written) tuple.

    Raises:
        FileNotFoundError, NotADirectoryError: If source_dir is unusable.
        SongProcessingError: If two songs would write the same CSV (checked
            before anything is written), or on the first song that fails.
    """
    song_files = list_song_files(source_dir, config.extensions)
    output_dir = get_output_dir(source_dir, config)
    check_csv_collisions(song_files, output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    log_info(verbose, "info", f"Found {len(song_files)} songs in {source_dir}")
    log_debug(debug, f"Output folder: {output_dir}")

    total_songs = 0
    total_cards = 0
    workers = config.workers

    if workers == 1:
        for path in song_files:
            songs_inc, cards_inc = process_song_file(path, output_dir, config.max_window, verbose, debug)
            total_songs += songs_inc
            total_cards += cards_inc
        set_thread_log_context()
    else:
        log_info(verbose, "info", f"Parallel workers: {workers}")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(process_song_file, path, output_dir, config.max_window, verbose, debug)
                for path in song_files
            ]
            for fut in as_completed(futures):
                songs_inc, cards_inc = fut.result()
                total_songs += songs_inc
                total_cards += cards_inc

    return total_songs, total_cards
