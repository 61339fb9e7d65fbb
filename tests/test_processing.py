import csv

import pytest

from lyricnotes.common.config import FolderConfig
from lyricnotes.output.processing import SongProcessingError, csv_path_for, process_folder, process_song_file


def _rows(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


def test_process_folder_writes_one_csv_per_song(lyrics_dir):
    songs, cards = process_folder(lyrics_dir, FolderConfig())

    assert songs == 2
    assert cards == 5 + 7
    written = sorted(p.name for p in lyrics_dir.glob("*.csv"))
    assert written == ["Couplet.csv", "Hey Jude.csv"]

    rows = _rows(lyrics_dir / "Hey Jude.csv")
    assert rows[0] == ["<small>Hey Jude</small><br/>--START--", "Hey Jude, don't make it bad"]
    assert rows[-1] == ["<small>Hey Jude</small><br/>Then you can start to make it better", "--END--"]
    assert len(rows) == 5


def test_process_folder_skips_empty_song(lyrics_dir, capsys):
    process_folder(lyrics_dir, FolderConfig(), verbose=True)

    out = capsys.readouterr().out
    assert '[skip] Skipping song "Silence" (no lyrics found)' in out
    assert not (lyrics_dir / "Silence.csv").exists()


def test_process_folder_honors_output_dir(lyrics_dir):
    process_folder(lyrics_dir, FolderConfig(output_dir="cards"))

    assert (lyrics_dir / "cards" / "Hey Jude.csv").exists()
    assert not (lyrics_dir / "Hey Jude.csv").exists()


def test_process_folder_with_cap_marks_ambiguous_cards(lyrics_dir):
    process_folder(lyrics_dir, FolderConfig(max_window=2))

    fronts = [row[0] for row in _rows(lyrics_dir / "Couplet.csv")]
    assert "<small>Couplet</small><br/><small>(1 of 2)</small><br/>x<br/>y" in fronts
    assert "<small>Couplet</small><br/><small>(2 of 2)</small><br/>x<br/>y" in fronts


def test_parallel_workers_write_the_same_files(lyrics_dir, tmp_path):
    process_folder(lyrics_dir, FolderConfig(output_dir=str(tmp_path / "serial")))
    process_folder(lyrics_dir, FolderConfig(output_dir=str(tmp_path / "parallel"), workers=3))

    for name in ("Hey Jude.csv", "Couplet.csv"):
        serial = (tmp_path / "serial" / name).read_text(encoding="utf-8")
        parallel = (tmp_path / "parallel" / name).read_text(encoding="utf-8")
        assert serial == parallel


def test_unreadable_song_names_the_file(lyrics_dir):
    bad = lyrics_dir / "Broken.txt"
    bad.write_bytes(b"\xff\xfe\xfa\n")

    with pytest.raises(SongProcessingError) as excinfo:
        process_folder(lyrics_dir, FolderConfig())

    assert excinfo.value.path == bad
    assert "Broken.txt" in str(excinfo.value)
    assert not (lyrics_dir / "Broken.csv").exists()


def test_process_song_file_returns_counts(lyrics_dir, tmp_path):
    out = tmp_path / "out"
    out.mkdir()

    assert process_song_file(lyrics_dir / "Hey Jude.txt", out) == (1, 5)
    assert process_song_file(lyrics_dir / "Silence.txt", out) == (0, 0)


def test_csv_path_for_sanitizes_title(tmp_path):
    assert csv_path_for(tmp_path, "AC/DC: Live?").name == "AC_DC_ Live_.csv"


def test_titles_sharing_a_csv_name_fail_before_writing(tmp_path):
    (tmp_path / "AC:DC.txt").write_text("Highway to hell\n", encoding="utf-8")
    (tmp_path / "AC_DC.txt").write_text("Back in black\n", encoding="utf-8")

    with pytest.raises(SongProcessingError) as excinfo:
        process_folder(tmp_path, FolderConfig(workers=2))

    message = str(excinfo.value)
    assert "AC:DC.txt" in message and "AC_DC.txt" in message
    assert "AC_DC.csv" in message
    assert list(tmp_path.glob("*.csv")) == []


def test_titles_differing_only_in_extension_case_collide(tmp_path):
    (tmp_path / "Song.txt").write_text("one\n", encoding="utf-8")
    (tmp_path / "Song.TXT").write_text("two\n", encoding="utf-8")

    with pytest.raises(SongProcessingError) as excinfo:
        process_folder(tmp_path, FolderConfig())

    assert "Song.csv" in str(excinfo.value)
    assert list(tmp_path.glob("*.csv")) == []


def test_titles_differing_only_in_case_collide(tmp_path):
    (tmp_path / "Help.txt").write_text("Help!\n", encoding="utf-8")
    (tmp_path / "help.txt").write_text("I need somebody\n", encoding="utf-8")

    with pytest.raises(SongProcessingError):
        process_folder(tmp_path, FolderConfig())
