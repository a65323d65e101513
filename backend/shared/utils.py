"""Shared utilities."""

from typing import Any, List, Optional

import orjson
from loguru import logger


def _clean_names(items: List[Any]) -> List[str]:
    return [s.strip() for s in items if isinstance(s, str) and s.strip()]


def _parse_pg_array(value: str) -> List[str]:
    """Parse a PostgreSQL text array literal, e.g. '{Ann,"Bob ""B"" Lee"}'."""
    inner = value[1:-1]
    if not inner.strip():
        return []
    names = []
    for part in inner.split(","):
        name = part.strip()
        if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
            name = name[1:-1].replace('""', '"')
        if name:
            names.append(name)
    return names


def parse_partner_string(value: Optional[str]) -> List[str]:
    """
    Normalize a stored partners value into a list of names.
    Accepts a JSON array string or a PostgreSQL-style array literal.
    Anything else is logged and treated as no partners.
    """
    if not isinstance(value, str) or not value.strip():
        return []
    value = value.strip()

    try:
        parsed = orjson.loads(value)
    except orjson.JSONDecodeError:
        pass
    else:
        if isinstance(parsed, list):
            return _clean_names(parsed)
        if not value.startswith("{"):
            logger.warning("Partners value is JSON but not an array: {!r}", value)
            return []

    if value.startswith("{") and value.endswith("}"):
        return _parse_pg_array(value)

    logger.warning("Could not parse partners value: {!r}", value)
    return []
