"""KPI list search"""

from typing import Any

from ..data.models import get_field
from ..data.parsers import is_row_sequence


def filter_kpis(rows: Any, term: Any) -> list:
    """
    Case-insensitive substring search over KPI names.

    Args:
        rows: KPIMetric objects or KPI row mappings
        term: Search box text; blank text keeps every row

    Returns:
        Matching rows in input order
    """
    if not is_row_sequence(rows):
        return []

    needle = term.strip().lower() if isinstance(term, str) else ""
    if not needle:
        return list(rows)

    return [
        row for row in rows
        if needle in str(get_field(row, "name") or "").lower()
    ]
