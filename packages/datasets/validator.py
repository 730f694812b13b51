"""
Dictionary diagnostics.

What this module does:
- Inspect a word list file (one entry per line) before a session starts.
- Count entries the word picker will accept (ASCII letters only, exact length N,
  any case) and entries it will silently drop.
- Detect duplicates (after lowercasing); compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Nothing here rejects a dictionary: the picker tolerates junk lines, so the
report is informational and the CLI only logs it.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("packages/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.feedback import NUM_LETTERS


@dataclass
class DictionaryReport:
    """Per-file diagnostics and metadata."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # entries the picker will keep
    unique_count: int    # distinct kept entries (after lowercasing)
    invalid_lines: int   # entries the picker will drop (blank lines excluded)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Split a word list into (kept_words, invalid_count) using the picker's rules.
    Blank lines are ignored rather than counted.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if len(w) == N and w.isascii() and w.isalpha():
                valid.append(w.lower())
            else:
                invalid += 1

    return valid, invalid


def validate_dictionary(path: str | Path, N: int = NUM_LETTERS) -> Dict:
    """
    Inspect the word list at `path` for word length N.

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport with counts, SHA-256, `passed`
        (file exists and holds at least one usable word) and `issues`.
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        return asdict(DictionaryReport(N, str(path), False, 0, 0, 0, "", False, issues))

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    if not words:
        issues.append("dictionary contains 0 usable words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s) that will be skipped")
    if unique != len(words):
        issues.append("dictionary contains duplicate words")

    rep = DictionaryReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | dictionary=485 (uniq=485, skipped=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | dictionary={report['count']} "
        f"(uniq={report['unique_count']}, skipped={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
