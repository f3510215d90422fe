# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-09
# Updated: 2026-01-20
# Description: settings.py
# -----------------------------------------------------------------------------
import os


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: float) -> float:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be a float, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Vector storage (Chroma collection name)
# -----------------------------------------------------------------------------
VECTOR_COLLECTION_DEFAULT = _env("KB_VECTOR_COLLECTION", "kb_chunks")


# -----------------------------------------------------------------------------
# Chunking
# -----------------------------------------------------------------------------
CHUNK_MAX_LENGTH = _env_int("KB_CHUNK_MAX_LENGTH", 400)


# -----------------------------------------------------------------------------
# Answer selection (confidence tiers)
# -----------------------------------------------------------------------------
HIGH_THRESHOLD = _env_float("KB_HIGH_THRESHOLD", 0.70)
MEDIUM_THRESHOLD = _env_float("KB_MEDIUM_THRESHOLD", 0.60)
TOP_K = _env_int("KB_TOP_K", 3)


# -----------------------------------------------------------------------------
# Embeddings
# -----------------------------------------------------------------------------
EMBED_BATCH_SIZE = _env_int("KB_EMBED_BATCH_SIZE", 256)
# 0 disables the dimension check in the deep health probe
EMBED_EXPECTED_DIM = _env_int("KB_EMBED_EXPECTED_DIM", 0)


# -----------------------------------------------------------------------------
# API / UI
# -----------------------------------------------------------------------------
API_BASE_URL = _env("KB_API_BASE_URL", "http://127.0.0.1:8000")
MOUNT_UI = _env_bool("KB_MOUNT_UI", True)


# -----------------------------------------------------------------------------
# Sanity checks (tunable)
# -----------------------------------------------------------------------------
if not VECTOR_COLLECTION_DEFAULT:
    raise RuntimeError("VECTOR_COLLECTION_DEFAULT resolved to empty value")

if CHUNK_MAX_LENGTH <= 0:
    raise RuntimeError(f"KB_CHUNK_MAX_LENGTH must be positive, got {CHUNK_MAX_LENGTH}")

if not (-1.0 <= MEDIUM_THRESHOLD <= HIGH_THRESHOLD <= 1.0):
    raise RuntimeError(
        f"Thresholds must satisfy -1 <= medium ({MEDIUM_THRESHOLD}) <= high ({HIGH_THRESHOLD}) <= 1"
    )

if EMBED_BATCH_SIZE <= 0:
    raise RuntimeError(f"KB_EMBED_BATCH_SIZE must be positive, got {EMBED_BATCH_SIZE}")
