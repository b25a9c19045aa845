"""ANSI escape handling: visible width and 24-bit coloring."""

import re

from rich.cells import cell_len
from rich.color import Color, ColorSystem
from rich.style import Style

from ..scanning.languages import RGB

ESC = "\x1b"

# CSI sequences (ESC '[' params... final byte in @-~), then any stray ESC.
_ESCAPE_RE = re.compile(r"\x1b\[[^\x40-\x7e]*[\x40-\x7e]?|\x1b")


def strip_ansi(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return _ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Number of terminal cells ``text`` occupies, ignoring escape sequences."""
    return cell_len(strip_ansi(text))


def colorize(text: str, rgb: RGB) -> str:
    """Wrap ``text`` in a 24-bit foreground color sequence."""
    red, green, blue = rgb
    style = Style(color=Color.from_rgb(red, green, blue))
    return style.render(text, color_system=ColorSystem.TRUECOLOR)
