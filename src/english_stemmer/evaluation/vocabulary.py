# src/english_stemmer/evaluation/vocabulary.py

"""Load reference vocabularies (`word stem` pairs) from a <data/> directory with caching.

File format: one pair per line, two whitespace-separated fields. Blank lines and
lines starting with '#' are skipped.

Used by the accuracy harness, the demo CLI, and tests needing hot reload.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable
from pathlib import Path
from types import TracebackType

from english_stemmer.utils import debug as topic_debug

# ── Public surface ────────────────────────────────────────────────────────────
VocabularyPairs = tuple[tuple[str, str], ...]
__all__ = [
    "VocabularyPairs",
    "load_vocabulary",
    "parse_vocabulary",
    "clear_vocabulary_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "VocabularyFileNotFound",
    "VocabularyParseError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class VocabularyFileNotFound(FileNotFoundError):
    """Raise when the requested vocabulary file cannot be read or resolved."""


class VocabularyParseError(ValueError):
    """Raise when a vocabulary line is not a `word stem` pair."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, encoding
_VOCAB_CACHE: dict[tuple[Path, float, str], VocabularyPairs] = {}

_DEFAULT_SUFFIX = ".txt"


def clear_vocabulary_cache() -> None:
    """Empty the in-memory vocabulary cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _VOCAB_CACHE.clear()
        log.debug("Vocabulary cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data'/'Data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    cands: list[Path] = []
    for p in [start, *start.parents]:
        for name in ("data", "Data"):
            cands.append((p / name).resolve())
    return cands


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    for var in ("STEMMER_DATA_DIR", "DATA_DIR"):
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def parse_vocabulary(lines: Iterable[str], *, source: str = "<memory>") -> VocabularyPairs:
    """
    Does: Parse `word stem` lines into ordered pairs, skipping blanks and '#' comments.
    Returns: Tuple of (word, stem).
    Raises: VocabularyParseError naming source and 1-based line number.
    """
    pairs: list[tuple[str, str]] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) != 2:
            raise VocabularyParseError(
                f"{source}:{lineno}: expected 'word stem', got {len(fields)} field(s): {line!r}"
            )
        pairs.append((fields[0], fields[1]))
    return tuple(pairs)


def load_vocabulary(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> VocabularyPairs:
    """Load <data>/<file>.txt, parse it into (word, stem) pairs, and cache results."""
    # Resolve base directory: explicit > env override > discovery
    if base_dir is None:
        env_dir = _env_data_dir()
        base_dir = env_dir or _default_data_dir()

    data_dir = Path(base_dir).resolve()

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file)
    file_name = file_str if Path(file_str).suffix else f"{file_str}{_DEFAULT_SUFFIX}"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise VocabularyFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise VocabularyFileNotFound(f"Vocabulary file not found: {path}")

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise VocabularyFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)

    with _CACHE_LOCK:
        if cache_key in _VOCAB_CACHE:
            log.debug("Vocabulary cache HIT: %s", path.name)
            return _VOCAB_CACHE[cache_key]

    # Read & parse
    try:
        with path.open("r", encoding=encoding, errors="strict") as f:
            pairs = parse_vocabulary(f, source=path.name)
    except UnicodeDecodeError as e:
        raise VocabularyParseError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise VocabularyFileNotFound(f"Cannot read {path}: {e}") from e

    with _CACHE_LOCK:
        _VOCAB_CACHE[cache_key] = pairs
        log.debug("Vocabulary cache MISS → STORED: %s (%d pairs)", path.name, len(pairs))
    topic_debug(f"loaded {len(pairs)} pairs from {path}", "vocabulary")

    return pairs


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("STEMMER_DATA_DIR")
        os.environ["STEMMER_DATA_DIR"] = self._new
        clear_vocabulary_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("STEMMER_DATA_DIR", None)
        else:
            os.environ["STEMMER_DATA_DIR"] = self._old
        clear_vocabulary_cache()
