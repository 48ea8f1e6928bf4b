from __future__ import annotations
import os

def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value

# Deepest formula/proof nesting accepted before DepthLimitError.
MAX_DEPTH = _int_env("LKCHECK_MAX_DEPTH", 400)
# Spaces between side-by-side premise blocks.
RENDER_GAP = _int_env("LKCHECK_RENDER_GAP", 4)
