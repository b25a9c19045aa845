"""Language classification by file extension.

Adding a new language:
  1. Add a member to ``Language``.
  2. Add a row to ``_LANGUAGE_TABLE`` with its extensions and color.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Tuple, Union

RGB = Tuple[int, int, int]

UNKNOWN_COLOR: RGB = (127, 127, 127)


class Language(Enum):
    """Known classifications. The value is the display name."""

    ASTRO = "Astro"
    BASH = "Bash"
    C = "C"
    CPP = "C++"
    CSHARP = "C#"
    CSS = "CSS"
    CSV = "CSV"
    GO = "Go"
    HTML = "HTML"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    JSON = "JSON"
    KOTLIN = "Kotlin"
    LUA = "Lua"
    MAKEFILE = "Makefile"
    MARKDOWN = "Markdown"
    PERL = "Perl"
    PHP = "PHP"
    POWERSHELL = "PowerShell"
    PYTHON = "Python"
    REACT = "React"
    RUBY = "Ruby"
    RUST = "Rust"
    SVELTE = "Svelte"
    SVG = "SVG"
    SWIFT = "Swift"
    TEXT = "Text"
    TOML = "TOML"
    TSV = "TSV"
    TYPESCRIPT = "TypeScript"
    XML = "XML"
    YAML = "YAML"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def color(self) -> RGB:
        return _COLORS[self]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Unknown:
    """An extension that is not in the lookup table."""

    extension: str

    @property
    def display_name(self) -> str:
        return f".{self.extension}"

    @property
    def color(self) -> RGB:
        return UNKNOWN_COLOR

    def __str__(self) -> str:
        return self.display_name


Classification = Union[Language, Unknown]


# ── Lookup table ───────────────────────────────────────────────────
# (language, extensions, color)

_LANGUAGE_TABLE: tuple[tuple[Language, tuple[str, ...], RGB], ...] = (
    (Language.ASTRO, ("astro",), (255, 69, 0)),
    (Language.BASH, ("sh",), (88, 156, 88)),
    (Language.C, ("c",), (70, 70, 240)),
    (Language.CPP, ("cpp",), (45, 45, 255)),
    (Language.CSHARP, ("cs",), (98, 164, 228)),
    (Language.CSS, ("css",), (86, 61, 124)),
    (Language.CSV, ("csv",), (0, 123, 255)),
    (Language.GO, ("go",), (0, 173, 216)),
    (Language.HTML, ("html", "htm"), (227, 76, 38)),
    (Language.JAVA, ("java",), (176, 114, 25)),
    (Language.JAVASCRIPT, ("js", "mjs", "cjs"), (247, 223, 30)),
    (Language.JSON, ("json", "jsonc"), (255, 224, 102)),
    (Language.KOTLIN, ("kt", "kts"), (136, 58, 163)),
    (Language.LUA, ("lua",), (0, 0, 255)),
    (Language.MAKEFILE, ("mk", "makefile"), (48, 77, 48)),
    (Language.MARKDOWN, ("md", "markdown"), (0, 102, 204)),
    (Language.PERL, ("pl", "pm"), (129, 133, 149)),
    (Language.PHP, ("php",), (79, 93, 149)),
    (Language.POWERSHELL, ("ps1", "psm1", "psd1"), (1, 36, 86)),
    (Language.PYTHON, ("py",), (53, 114, 165)),
    (Language.REACT, ("jsx", "tsx"), (0, 122, 204)),
    (Language.RUBY, ("rb",), (204, 52, 51)),
    (Language.RUST, ("rs",), (255, 165, 0)),
    (Language.SVELTE, ("svelte",), (255, 62, 0)),
    (Language.SVG, ("svg",), (255, 181, 0)),
    (Language.SWIFT, ("swift",), (255, 102, 0)),
    (Language.TEXT, ("txt", "text"), (255, 255, 255)),
    (Language.TOML, ("toml",), (120, 120, 120)),
    (Language.TSV, ("tsv",), (0, 123, 255)),
    (Language.TYPESCRIPT, ("ts",), (0, 122, 204)),
    (Language.XML, ("xml",), (255, 153, 51)),
    (Language.YAML, ("yaml", "yml"), (255, 255, 0)),
)

_BY_EXTENSION: dict[str, Language] = {
    ext: language for language, extensions, _ in _LANGUAGE_TABLE for ext in extensions
}

_COLORS: dict[Language, RGB] = {language: color for language, _, color in _LANGUAGE_TABLE}


def from_extension(extension: str) -> Classification:
    """Map a bare extension (no leading dot) to its classification."""
    ext = extension.lower()
    language = _BY_EXTENSION.get(ext)
    if language is None:
        return Unknown(ext)
    return language


def classify(path: Union[str, Path]) -> Classification:
    """Classify a path by its extension; no extension means plain text."""
    suffix = Path(path).suffix
    if not suffix or suffix == ".":
        return Language.TEXT
    return from_extension(suffix[1:])
