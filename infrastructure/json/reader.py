from __future__ import annotations

import json
from typing import Any, Dict, List

import structlog

from domain.errors import DataSourceError, FormatError

logger = structlog.get_logger(__name__)


def read_records(path: str) -> List[Dict[str, Any]]:
    """
    Read a JSON file holding an array of objects.

    Raises `DataSourceError` if the file cannot be read and `FormatError` if
    it is not valid JSON or not an array of objects.
    """

    try:
        with open(path, encoding="utf-8") as fh:
            content = fh.read()
    except OSError as exc:
        raise DataSourceError(f"Error reading JSON file {path}: {exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise FormatError(f"Error decoding JSON file {path}: {exc}", path=path) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Error parsing JSON file {path}: {exc}", path=path) from exc
    except RecursionError as exc:
        raise FormatError(f"Error parsing JSON file {path}: nesting too deep", path=path) from exc

    if not isinstance(data, list):
        raise FormatError(
            f"Error parsing JSON file {path}: expected an array of records, "
            f"got {type(data).__name__}",
            path=path,
        )
    for position, record in enumerate(data):
        if not isinstance(record, dict):
            raise FormatError(
                f"Error parsing JSON file {path}: record {position} is not an object",
                path=path,
            )

    logger.debug("records_read", path=path, count=len(data))
    return data


def require(record: Dict[str, Any], key: str, kind: type, path: str) -> Any:
    """
    Fetch `record[key]`, checking it has the given basic type.

    `bool` is not accepted where an `int` is expected.
    """

    if key not in record:
        raise FormatError(
            f"Error parsing JSON file {path}: record {record.get('id')!r} is missing {key!r}",
            path=path,
        )
    value = record[key]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise FormatError(
            f"Error parsing JSON file {path}: record {record.get('id')!r} has "
            f"{key!r} of type {type(value).__name__}, expected {kind.__name__}",
            path=path,
        )
    return value
