"""Buddhist Era / Common Era year conversion.

Thai legislation is dated in the Buddhist Era (B.E.); B.E. = C.E. + 543.
"""

from typing import Final

BE_OFFSET: Final[int] = 543

# A bare four-digit year above this value is read as B.E., otherwise C.E.
# Heuristic: it misreads C.E. years after 2400 and B.E. years before 2401,
# neither of which occurs in the modern statute corpus.
ERA_YEAR_THRESHOLD: Final[int] = 2400


def to_western(era_year: int) -> int:
    """Convert a B.E. year to C.E."""
    return era_year - BE_OFFSET


def to_era(western_year: int) -> int:
    """Convert a C.E. year to B.E."""
    return western_year + BE_OFFSET


def is_era_year(year: int) -> bool:
    """Whether a bare year of unknown epoch should be read as B.E."""
    return year > ERA_YEAR_THRESHOLD


def split_year(year: int) -> tuple[int, int]:
    """Return ``(era_year, western_year)`` for a year of unknown epoch."""
    if is_era_year(year):
        return year, to_western(year)
    return to_era(year), year
