"""
Batch-scoped team numbers.

Each batch owns one or more inclusive integer ranges. A team number is
rendered as ``"<PREFIX> <YY>-<NNN>"``, for example ``"SSR 25-078"``.
"""

from collections.abc import Iterable
from collections.abc import Iterator

from django.conf import settings

# Inclusive ranges, enumerated in order.
BATCH_RANGES: dict[str, tuple[tuple[int, int], ...]] = {
    "AI_A": ((1, 12),),
    "AI_B": ((13, 23),),
    "AI_DS": ((24, 34),),
    "CYS": ((35, 41),),
    "CSE_A": ((42, 52),),
    "CSE_B": ((53, 64),),
    "CSE_C": ((65, 77),),
    "CSE_D": ((78, 89), (161, 161)),
    "ECE_A": ((90, 99),),
    "ECE_B": ((100, 112),),
    "EAC": ((113, 123),),
    "ELC": ((124, 132),),
    "EEE": ((133, 140),),
    "ME": ((141, 150),),
    "RAE": ((151, 160),),
}


class UnknownBatchError(KeyError):
    pass


def format_team_number(sequence: int, *, prefix: str | None = None, year: str | None = None) -> str:
    prefix = settings.TEAM_NUMBER_PREFIX if prefix is None else prefix
    year = settings.TEAM_NUMBER_YEAR if year is None else year
    return f"{prefix} {year}-{sequence:03d}"


def sequences_for_batch(batch: str) -> Iterator[int]:
    try:
        ranges = BATCH_RANGES[batch]
    except KeyError:
        raise UnknownBatchError(batch) from None
    for start, end in ranges:
        yield from range(start, end + 1)


def team_numbers_for_batch(batch: str) -> list[str]:
    """Every team number of a batch, across all its ranges in order."""
    return [format_team_number(n) for n in sequences_for_batch(batch)]


def is_valid_team_number(batch: str, team_number: str) -> bool:
    return batch in BATCH_RANGES and team_number in team_numbers_for_batch(batch)


def available_team_numbers(batch: str, taken: Iterable[str]) -> list[str]:
    """Team numbers of the batch not present in ``taken``."""
    taken = set(taken)
    return [number for number in team_numbers_for_batch(batch) if number not in taken]


def next_team_number(batch: str, taken: Iterable[str]) -> str | None:
    """Lowest unused team number of the batch, None once the batch is full."""
    available = available_team_numbers(batch, taken)
    return available[0] if available else None
