from typing import Dict, Iterable, Iterator, Tuple

import pandas as pd

from .config import STATUS_PRIORITY
from .models import BookingSummary


def status_rank(status: str) -> int:
    """Index in STATUS_PRIORITY; statuses outside the enumeration rank last."""
    try:
        return STATUS_PRIORITY.index(status)
    except ValueError:
        return len(STATUS_PRIORITY)


def summarize_statuses(summaries: Iterable[BookingSummary]) -> Dict[str, int]:
    """
    Count bookings per status, ordered by STATUS_PRIORITY.

    Statuses with no bookings are left out. Unknown statuses are still
    counted, after the known ones in first-seen order, so the counts always
    add up to the number of bookings.
    """
    statuses = pd.Series([s.status for s in summaries], dtype="object")
    if statuses.empty:
        return {}

    counts = statuses.value_counts(sort=False, dropna=False)
    ordered = [s for s in STATUS_PRIORITY if s in counts.index]
    ordered += [s for s in counts.index if s not in STATUS_PRIORITY]
    return {status: int(counts[status]) for status in ordered}


def iter_status_buckets(counts: Dict[str, int]) -> Iterator[Tuple[str, int]]:
    """Yield (status, count) for the known statuses present, in priority order."""
    for status in STATUS_PRIORITY:
        if counts.get(status):
            yield status, counts[status]
