from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

log = logging.getLogger(__name__)

# Embedded word list used when no --dictionary is given.
DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "dictionary.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(path: Optional[Path | str] = None) -> List[str]:
    """
    Load the raw dictionary, one entry per line, surrounding whitespace trimmed.

    Entries are NOT filtered here; the word picker drops anything that is not a
    five-letter ASCII word. With no path the embedded default list is used.
    """
    source = Path(path) if path is not None else DEFAULT_DICTIONARY
    log.debug("loading dictionary from %s", source if path is not None else "default dictionary")
    words = [ln.strip() for ln in read_lines(source) if ln.strip()]
    log.info("processed word list containing %d words", len(words))
    return words
