import pytest


HEY_JUDE = """Hey Jude, don't make it bad

Take a sad song and make it better
  Remember to let her into your heart
Then you can start to make it better
"""

COUPLET = "a\nx\ny\nb\nx\ny\nc\n"


@pytest.fixture
def lyrics_dir(tmp_path):
    """A lyrics folder with two songs, an empty song and files that aren't songs."""
    folder = tmp_path / "lyrics"
    folder.mkdir()
    (folder / "Hey Jude.txt").write_text(HEY_JUDE, encoding="utf-8")
    (folder / "Couplet.txt").write_text(COUPLET, encoding="utf-8")
    (folder / "Silence.txt").write_text("\n  \n", encoding="utf-8")
    (folder / "README.md").write_text("not a song\n", encoding="utf-8")
    (folder / ".draft.txt").write_text("hidden\n", encoding="utf-8")
    return folder
