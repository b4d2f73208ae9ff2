"""Row serialization helpers shared by the Supabase repositories."""

from datetime import datetime
from typing import Any, Dict


def to_row(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert datetimes to ISO strings so the row is JSON-safe."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in data.items()
    }
