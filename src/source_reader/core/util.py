from __future__ import annotations
from typing import Dict, Any

from .classify import parse_source
from .model import Result
from .naming import describe


def result_asdict(res: Result) -> Dict[str, Any]:
    """Return a JSON-serialisable dict for a CLI result (skip None)."""
    payload = describe(parse_source(res.source))
    payload.update({"success": res.success, "bytes_read": res.bytes_read, "error": res.error})
    return {k: v for k, v in payload.items() if v is not None}
