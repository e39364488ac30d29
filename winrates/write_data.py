"""
Write the generated lookup tables to disk as JSON.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping, Union

from openingbook.errors import DataWriteError

from .concurrency import gather

logger = logging.getLogger(__name__)


def write_json(directory: Union[str, Path], filename: str, data: Any) -> Path:
    """
    Serialise data as indented JSON into ``directory/filename``.

    Raises:
        DataWriteError: If the file cannot be written
    """
    path = Path(directory) / filename
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(data, indent=2, ensure_ascii=False))
    except OSError as e:
        raise DataWriteError(f"Error writing to {filename}: {e}", path=str(path)) from e

    logger.info(f"Data written to {filename}")
    return path


def write_lookups(outputs: Mapping[str, Any], directory: Union[str, Path]) -> None:
    """
    Write every output file, all at once.

    The directory is created if needed. Writes are independent: if one
    fails the others still run to completion, then the first failure is
    raised. Files are not written atomically.

    Args:
        outputs: Data keyed by file name
        directory: Output directory

    Raises:
        DataWriteError: If the directory or any file cannot be written
    """
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise DataWriteError(f"Cannot create data directory {directory}: {e}", path=str(directory)) from e

    gather(lambda item: write_json(directory, item[0], item[1]), list(outputs.items()))
    logger.info(f"Wrote {len(outputs)} files to {directory}")
