"""Card rendering for lyric notes.

Card Format:
============
FRONT (HTML fragment, pieces separated by <br/>):
- <small>song title</small>
- <small>(2 of 3)</small> when other notes share this prompt
- each prompt line

BACK:
- the answer line
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, NavigableString  # type: ignore

from lyricnotes.input.lyrics import Song
from lyricnotes.notes.derive import AnnotatedNote


@dataclass(frozen=True)
class Card:
    """A rendered card: the two fields of one CSV row."""
    front: str
    back: str


def _fragment() -> BeautifulSoup:
    return BeautifulSoup("", "html.parser")


def _small(soup: BeautifulSoup, text: str):
    tag = soup.new_tag("small")
    tag.string = text
    return tag


def ambiguity_marker(rank: int, siblings: int) -> str:
    """Text telling which of the notes sharing a prompt this one is."""
    return f"({rank} of {siblings})"


def render_front(
    title: str,
    prompt: Sequence[str],
    rank: Optional[int] = None,
    siblings: int = 1,
) -> str:
    """Render the front of a card as an HTML fragment."""
    soup = _fragment()
    pieces = [_small(soup, title)]
    if rank is not None and siblings > 1:
        pieces.append(_small(soup, ambiguity_marker(rank, siblings)))
    pieces.extend(NavigableString(line) for line in prompt)

    for i, piece in enumerate(pieces):
        if i > 0:
            soup.append(soup.new_tag("br"))
        soup.append(piece)
    return str(soup)


def render_back(answer: str) -> str:
    """Render the back of a card (the answer, HTML-escaped)."""
    soup = _fragment()
    soup.append(NavigableString(answer))
    return str(soup)


def render_card(title: str, annotated: AnnotatedNote) -> Card:
    """Render one annotated note as a card."""
    note = annotated.note
    return Card(
        front=render_front(title, note.prompt, annotated.rank, annotated.siblings),
        back=render_back(note.answer),
    )


def render_song_cards(song: Song, notes: Sequence[AnnotatedNote]) -> List[Card]:
    """Render all of a song's notes, keeping their order."""
    return [render_card(song.title, annotated) for annotated in notes]
