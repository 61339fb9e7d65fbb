import pytest

from lyricnotes.input.lyrics import EmptySongError, Song, list_song_files, parse_lyrics_text, read_song


def test_parse_lyrics_text_strips_and_drops_blank_lines():
    text = "  Hey Jude  \n\n\tdon't make it bad\r\n   \n"
    assert parse_lyrics_text(text) == ["Hey Jude", "don't make it bad"]


def test_parse_lyrics_text_keeps_repeated_lines():
    assert parse_lyrics_text("na\nna\nna\n") == ["na", "na", "na"]


def test_song_lines_are_bracketed():
    song = Song(title="t", lyrics=["a", "b"])
    assert song.lines == ["--START--", "a", "b", "--END--"]
    assert song.lyrics == ["a", "b"]


def test_read_song_uses_file_stem_as_title(tmp_path):
    path = tmp_path / "Hey Jude.txt"
    path.write_text("Hey Jude, don't make it bad\n\nTake a sad song\n", encoding="utf-8")

    song = read_song(path)

    assert song.title == "Hey Jude"
    assert song.lyrics == ["Hey Jude, don't make it bad", "Take a sad song"]
    assert song.source == path


def test_read_song_rejects_empty_file(tmp_path):
    path = tmp_path / "Silence.txt"
    path.write_text("\n   \n\t\n", encoding="utf-8")

    with pytest.raises(EmptySongError) as excinfo:
        read_song(path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value, ValueError)


def test_read_song_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "Broken.txt"
    path.write_bytes(b"\xff\xfe\xfa bad bytes\n")

    with pytest.raises(UnicodeDecodeError):
        read_song(path)


def test_list_song_files_filters_and_sorts(tmp_path):
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "A.TXT").write_text("a", encoding="utf-8")
    (tmp_path / "notes.md").write_text("x", encoding="utf-8")
    (tmp_path / ".hidden.txt").write_text("x", encoding="utf-8")
    (tmp_path / "album.txt").mkdir()

    assert [p.name for p in list_song_files(tmp_path)] == ["A.TXT", "b.txt"]
    assert [p.name for p in list_song_files(tmp_path, ["md"])] == ["notes.md"]


def test_list_song_files_rejects_bad_directories(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_song_files(tmp_path / "missing")

    path = tmp_path / "song.txt"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(NotADirectoryError):
        list_song_files(path)


def test_parse_lyrics_text_splits_only_on_newlines():
    text = "page\x0cbreak\nline separator\r\nlast\x85line\n"
    assert parse_lyrics_text(text) == ["page\x0cbreak", "line separator", "last\x85line"]
