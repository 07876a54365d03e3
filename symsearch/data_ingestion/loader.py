import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from symsearch.data_ingestion.exceptions import CorpusError

logger = logging.getLogger(__name__)


def load_package_data(path: Union[str, Path]) -> Dict[str, Any]:
    """Load package data from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        Parsed package data

    Raises:
        CorpusError: If the file is missing, unreadable or not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise CorpusError(f"Package data not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CorpusError(f"Invalid JSON in package data {path}: {e}", e)
    except OSError as e:
        raise CorpusError(f"Error reading package data {path}: {e}", e)

    if not isinstance(data, dict):
        raise CorpusError(f"Package data in {path} must be a JSON object")

    logger.debug(f"Loaded package data from {path}")
    return data
