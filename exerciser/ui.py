"""Terminal output helpers: colours, emoji fallbacks, status lines and a spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"

_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"


def no_emoji() -> bool:
    """Return True when the user asked for output without emoji."""
    return "NO_EMOJI" in os.environ


def _colors_enabled() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def emoji(fancy: str, plain: str) -> str:
    """Pick ``fancy`` when the terminal can show it, ``plain`` otherwise."""
    if no_emoji():
        return plain
    encoding = getattr(sys.stdout, "encoding", None) or "ascii"
    try:
        fancy.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return plain
    return fancy


def bold(text: object) -> str:
    return _paint(text, _BOLD)


def red(text: object) -> str:
    return _paint(text, _RED)


def green(text: object) -> str:
    return _paint(text, _GREEN)


def blue(text: object) -> str:
    return _paint(text, _BLUE)


def warn(message: str) -> None:
    """Print a warning line in red."""
    mark = "!" if no_emoji() else emoji("⚠️ ", "!")
    print(f"{red(mark)} {red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    mark = "✓" if no_emoji() else emoji("✅", "✓")
    print(f"{green(mark)} {green(message)}")


class Spinner:
    """An animated status line on stderr, drawn only when stderr is a terminal."""

    def __init__(self, message: str = "", *, stream=None, interval: float = 0.1):
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._interval = interval
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _draw(self, frame: str) -> None:
        with self._lock:
            self._stream.write(f"\r\x1b[2K{frame} {self.message}")
            self._stream.flush()

    def _tick(self) -> None:
        for frame in itertools.cycle(_SPINNER_FRAMES):
            if self._stop.is_set():
                return
            self._draw(frame)
            self._stop.wait(self._interval)

    def start(self) -> None:
        isatty = getattr(self._stream, "isatty", None)
        if self._thread is not None or not (isatty and isatty()):
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._tick, daemon=True)
        self._thread.start()

    def set_message(self, message: str) -> None:
        with self._lock:
            self.message = message

    def finish_and_clear(self) -> None:
        """Stop the animation and wipe the status line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        with self._lock:
            self._stream.write("\r\x1b[2K")
            self._stream.flush()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.finish_and_clear()