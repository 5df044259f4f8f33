"""
Request dependency resolving the day bills are aged against.
"""

from datetime import date
from typing import Optional

from fastapi import Query

from textile_billing.deps.di_container import get_container


def get_today(
    as_of: Optional[date] = Query(
        None,
        description="Age bills as of this date (YYYY-MM-DD). Defaults to today.",
    ),
) -> date:
    """Explicit ``as_of`` wins, otherwise the container's clock."""
    if as_of is not None:
        return as_of
    return get_container().today()
