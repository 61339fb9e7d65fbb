"""Logging utilities for note generation.

Messages are plain prints tagged like ``[file] Wrote Song.csv``. When songs are
processed by several workers, stdout can be wrapped so every line also names
the worker and the song it belongs to.
"""

import sys
import threading
from typing import Dict, Optional, TextIO


# Number of songs processed in parallel unless overridden by config or CLI
DEFAULT_PARALLEL_WORKERS = 1

# Module-level state
_THREAD_IDX_LOCK = threading.Lock()
_THREAD_IDX_MAP: Dict[int, int] = {}
_THREAD_IDX_NEXT = 0

# Thread-local log context (current song)
_LOG_CTX = threading.local()

_TAG_EMOJI = {
    "file": "💾",
    "skip": "⏭️",
    "notes": "🃏",
    "error": "❌",
}


def set_thread_log_context(song: str = "") -> None:
    """Set the logging context for the current thread."""
    _LOG_CTX.song = song


def get_thread_log_context() -> str:
    """Get the song name logged by the current thread, if any."""
    return getattr(_LOG_CTX, "song", "")


def log_info(enabled: bool, tag: str, message: str) -> None:
    """Print a tagged message if verbose output is enabled."""
    if enabled:
        print(f"[{tag}] {message}")


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        print(f"[debug] {message}")


def log_error(message: str, stream: Optional[TextIO] = None) -> None:
    """Print an error message to stderr."""
    print(f"[error] {message}", file=stream or sys.stderr)


def _short_thread_id() -> str:
    """Map the OS thread id to a small stable index like t00, t01."""
    global _THREAD_IDX_NEXT
    tid = threading.get_ident()
    with _THREAD_IDX_LOCK:
        idx = _THREAD_IDX_MAP.get(tid)
        if idx is None:
            idx = _THREAD_IDX_NEXT
            _THREAD_IDX_MAP[tid] = idx
            _THREAD_IDX_NEXT = (_THREAD_IDX_NEXT + 1) % 100
    return f"t{idx:02d}"


def _emoji_for(line: str) -> str:
    if not line.startswith("["):
        return ""
    end = line.find("]")
    if end == -1:
        return ""
    return _TAG_EMOJI.get(line[1:end], "")


class ThreadPrefixedWriter:
    """Wrapper for a text stream that adds worker ids and song context to output."""

    def __init__(self, wrapped: TextIO):
        self._wrapped = wrapped
        self._lock = threading.Lock()

    def _prefix(self) -> str:
        song = get_thread_log_context()
        context = f"[{_short_thread_id()}]"
        context += f" [{song}]" if song else " [main]"
        return context + " "

    def write(self, s: str) -> int:
        if not isinstance(s, str):
            return 0
        # print() sends the newline as a separate write
        if s == "\n":
            with self._lock:
                self._wrapped.write("\n")
                self._wrapped.flush()
            return 1

        prefix = self._prefix()
        with self._lock:
            parts = s.split("\n")
            has_trailing_newline = len(parts) > 1 and parts[-1] == ""

            for i, part in enumerate(parts):
                if part == "" and i == len(parts) - 1:
                    continue

                end = part.find("]") if part.startswith("[") else -1
                if end != -1:
                    tag = part[:end + 1]
                    rest = part[end + 1:].lstrip()
                    emoji = _emoji_for(part)
                    emoji_spacer = (emoji + " ") if emoji else ""
                    self._wrapped.write(prefix + tag + " " + emoji_spacer + rest)
                else:
                    self._wrapped.write(prefix + part)

                if i < len(parts) - 1:
                    self._wrapped.write("\n")

            if has_trailing_newline:
                self._wrapped.write("\n")
            self._wrapped.flush()
        return len(s)

    def flush(self) -> None:
        self._wrapped.flush()

    def isatty(self) -> bool:
        return bool(self._wrapped.isatty())


def setup_thread_prefixed_stdout() -> None:
    """Set up thread-prefixed stdout writer."""
    if isinstance(sys.stdout, ThreadPrefixedWriter):
        return
    try:
        sys.stdout.reconfigure(line_buffering=True)  # type: ignore
    except AttributeError:
        pass
    sys.stdout = ThreadPrefixedWriter(sys.stdout)  # type: ignore
