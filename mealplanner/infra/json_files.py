"""JSON file helpers shared by the repositories (one list of records per file)."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from mealplanner.utilities.errors import StorageError

logger = logging.getLogger(__name__)


def read_records(path: Path) -> List[Dict[str, Any]]:
    """Read a list of records; a missing file is an empty table."""
    if not path.exists():
        logger.debug(f"{path} not found, starting empty")
        return []
    try:
        with open(path, 'r', encoding='utf-8') as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise StorageError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        raise StorageError(f"Cannot read {path}: {e}") from e
    if not isinstance(records, list):
        raise StorageError(f"Expected a list of records in {path}")
    return records


def write_records(path: Path, records: List[Dict[str, Any]]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error(f"Cannot write {path}: {e}")
        raise StorageError(f"Cannot write {path}: {e}") from e
    logger.debug(f"Wrote {len(records)} records to {path}")
