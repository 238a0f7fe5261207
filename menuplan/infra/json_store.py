"""Small JSON file helpers shared by the repositories."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def load_json(path: Path, default):
    """Read JSON from path; missing or invalid files yield `default` (logged)."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning(f"Data file not found: {path}. Using empty data.")
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
    return default


def save_json(path: Path, data) -> None:
    """Write JSON atomically (temp file in the same directory, then move)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
