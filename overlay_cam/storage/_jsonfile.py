"""Small JSON file helpers shared by the stores."""
import json
from pathlib import Path
from typing import Any

from loguru import logger


def read_json(path: Path, default: Any = None) -> Any:
    """Read JSON; missing or corrupt files yield default (corruption is logged)."""
    if not path.exists():
        return default
    try:
        with open(path) as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load {path.name}: {e}")
        return default


def write_json(path: Path, data: Any) -> None:
    """Write atomically by writing to temp then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix('.tmp')
    try:
        with open(temp_path, 'w') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        temp_path.replace(path)
    except OSError:
        if temp_path.exists():
            temp_path.unlink()
        raise
