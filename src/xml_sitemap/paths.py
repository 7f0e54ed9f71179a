from __future__ import annotations

from datetime import datetime
from pathlib import Path

def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path

def file_exists(path: Path | str) -> bool:
    return Path(path).exists()

def modified_time(path: Path | str) -> datetime:
    """Local modification time of ``path``, read fresh from disk on every call."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    return datetime.fromtimestamp(p.stat().st_mtime)
