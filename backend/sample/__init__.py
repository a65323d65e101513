"""
Bundled demo family (four generations) for the sample tree endpoint.
Read once with orjson and cached.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import orjson

from shared.models import Member, coerce_members

SAMPLE_FILE = Path(__file__).parent / "family.json"

_sample_cache: Optional[List[Dict[str, Any]]] = None


def load_sample_records() -> List[Dict[str, Any]]:
    global _sample_cache
    if _sample_cache is None:
        _sample_cache = orjson.loads(SAMPLE_FILE.read_bytes())
    return [dict(r) for r in _sample_cache]


def load_sample_members() -> List[Member]:
    return coerce_members(load_sample_records())
