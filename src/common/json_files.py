import json
from pathlib import Path
from typing import Any

from common.logger import logger


def load_json_file(filepath: str | Path) -> Any:
    """Load a JSON document from disk, raising on a missing or malformed file."""
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"File {filepath} doesn't exist")

    with filepath.open(encoding="utf-8") as f:
        data = json.load(f)

    logger.debug(f"Loaded data from {filepath}")
    return data


def save_to_json(data: Any, filepath: str | Path) -> Path:
    """Write data as indented UTF-8 JSON, creating parent directories."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with filepath.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=4)

    logger.debug(f"Saved data to {filepath}")
    return filepath
