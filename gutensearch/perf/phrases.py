"""Search phrase files."""

from pathlib import Path

DEFAULT_PHRASES_PATH = Path(__file__).with_name("phrases.txt")


def read_phrases(path: Path | None = None) -> list[str]:
    """Read one phrase per line; empty lines are kept as empty phrases."""
    target = path or DEFAULT_PHRASES_PATH
    return target.read_text(encoding="utf-8").split("\n")
