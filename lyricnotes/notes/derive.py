"""Prompt/answer note derivation for a single song.

A song's lines are bracketed by two sentinel lines:

    ["--START--", line 1, ..., line n, "--END--"]

Every line after the first becomes the answer of one note. Its prompt is the
shortest run of lines immediately before it that never appears elsewhere in
the song followed by a *different* line. Seeing the prompt is then enough to
know which line comes next.

Example, for the lines ``S a x y b x y c E``:

    [S]        -> a
    [a]        -> x
    [x]        -> y        (both "x" lines are followed by "y")
    [a, x, y]  -> b        ([y] and [x, y] are also followed by "c")
    [b]        -> x
    [b, x, y]  -> c
    [c]        -> E

The second ``[x] -> y`` collapses into the first.

Notes are deduplicated in first-occurrence order. A prompt shared by notes
with different answers (only possible when the window size is capped; an
uncapped fallback to the whole prefix is never shared by two lines) is
marked so the rendered card can say which occurrence it is.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from lyricnotes.common.utils import unique_preserve_order


START_MARKER = "--START--"
END_MARKER = "--END--"


@dataclass(frozen=True)
class Note:
    """One flashcard: the lines shown as the prompt and the line to recall."""
    prompt: Tuple[str, ...]
    answer: str


@dataclass(frozen=True)
class AnnotatedNote:
    """A note plus its position among notes sharing the same prompt."""
    note: Note
    rank: Optional[int] = None  # 1-based; only set when siblings > 1
    siblings: int = 1

    @property
    def is_ambiguous(self) -> bool:
        return self.siblings > 1


def augment_lines(lyrics: Sequence[str]) -> List[str]:
    """Bracket the lyric lines with the start and end sentinels."""
    return [START_MARKER, *lyrics, END_MARKER]


def window_ending_at(lines: Sequence[str], end: int, size: int) -> Optional[List[str]]:
    """The ``size`` lines immediately before ``end``.

    Returns None if ``end`` is not a line that can be answered or the window
    would start before the first line.
    """
    if size < 1 or not 0 < end < len(lines) or size > end:
        return None
    return list(lines[end - size:end])


def window_is_unique(lines: Sequence[str], end: int, size: int) -> bool:
    """Check whether the window of ``size`` lines ending at ``end`` predicts ``lines[end]``.

    The window is unique unless the exact same window ends at some other index
    whose line differs from ``lines[end]``.
    """
    window = window_ending_at(lines, end, size)
    if window is None:
        return False

    answer = lines[end]
    for other in range(size, len(lines)):
        if other == end or lines[other] == answer:
            continue
        if list(lines[other - size:other]) == window:
            return False
    return True


def shortest_unique_window_size(
    lines: Sequence[str],
    end: int,
    max_window: Optional[int] = None,
) -> Optional[int]:
    """Smallest window size ending at ``end`` that is unique, or None if none is.

    Sizes above ``max_window`` are not tried.
    """
    if not 0 < end < len(lines):
        return None

    largest = end if max_window is None else min(end, max_window)
    for size in range(1, largest + 1):
        if window_is_unique(lines, end, size):
            return size
    return None


def unique_notes(notes: Sequence[Note]) -> List[Note]:
    """Drop repeated (prompt, answer) pairs, keeping first occurrences in order."""
    return unique_preserve_order(notes)


def derive_notes(lines: Sequence[str], max_window: Optional[int] = None) -> List[Note]:
    """Derive the deduplicated notes for a song's augmented lines.

    Args:
        lines: Sentinel-bracketed lines (see augment_lines); at least two.
        max_window: Optional cap on the prompt size. Without a cap, a line
            with no unique window (only possible when a lyric line is itself
            "--START--") uses the whole prefix, which never yields siblings.
            With a cap, lines whose context can't be told apart within the
            cap use the largest allowed window and end up as ambiguous siblings.

    Raises:
        ValueError: If there are fewer than two lines, or max_window < 1.
    """
    if len(lines) < 2:
        raise ValueError(f"need at least 2 lines to derive notes, got {len(lines)}")
    if max_window is not None and max_window < 1:
        raise ValueError(f"max_window must be at least 1, got {max_window}")

    notes: List[Note] = []
    for end in range(1, len(lines)):
        size = shortest_unique_window_size(lines, end, max_window)
        if size is None:
            size = end if max_window is None else min(end, max_window)
        notes.append(Note(prompt=tuple(lines[end - size:end]), answer=lines[end]))

    return unique_notes(notes)


def annotate_ambiguity(notes: Sequence[Note]) -> List[AnnotatedNote]:
    """Rank notes whose prompt is shared with notes that have different answers.

    Distinct answers under one prompt are ranked 1, 2, ... in order of first
    appearance. Notes with a prompt of their own get no rank.
    """
    answers_by_prompt: Dict[Tuple[str, ...], List[str]] = defaultdict(list)
    for note in notes:
        answers = answers_by_prompt[note.prompt]
        if note.answer not in answers:
            answers.append(note.answer)

    annotated: List[AnnotatedNote] = []
    for note in notes:
        answers = answers_by_prompt[note.prompt]
        if len(answers) > 1:
            annotated.append(AnnotatedNote(note, answers.index(note.answer) + 1, len(answers)))
        else:
            annotated.append(AnnotatedNote(note))
    return annotated


def notes_for_lyrics(lyrics: Sequence[str], max_window: Optional[int] = None) -> List[AnnotatedNote]:
    """Derive and annotate the notes for a song's lyric lines (without sentinels)."""
    return annotate_ambiguity(derive_notes(augment_lines(lyrics), max_window=max_window))
