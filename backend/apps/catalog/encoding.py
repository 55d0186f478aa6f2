"""Encoding of ordered string lists stored as JSON text columns."""
import json
from typing import Iterable, List, Optional

from apps.common import get_logger

logger = get_logger(__name__).bind(component="catalog", layer="encoding")


def encode_string_list(values: Optional[Iterable[str]]) -> Optional[str]:
    if values is None:
        return None
    return json.dumps([str(v) for v in values], ensure_ascii=False)


def decode_string_list(
    raw: Optional[str], *, owner: Optional[str] = None, field: Optional[str] = None
) -> Optional[List[str]]:
    """Decode a stored JSON array.

    Absent, malformed or non-array values come back as None. Malformed values
    are reported once per (owner, field, value) and never raised.
    """
    if raw is None:
        return None
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        value = None
    else:
        if isinstance(value, list):
            return [str(item) for item in value]
    logger.warning_once(
        ("decode", owner, field, raw),
        "Stored list is not a JSON array; treating as absent",
        owner=owner,
        field=field,
        value=raw,
    )
    return None
