from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from ..constants import UNSTABLE_API_VERSION


def _quarter_month(quarter: int) -> str:
    return f"{quarter * 3 - 2:02d}"


def _previous_version(year: int, quarter: int, n_quarters: int) -> str:
    version_quarter = quarter - n_quarters
    if version_quarter <= 0:
        return f"{year - 1}-{_quarter_month(version_quarter + 4)}"
    return f"{year}-{_quarter_month(version_quarter)}"


def get_current_api_version(today: Optional[date] = None) -> Tuple[int, int, str]:
    """Return (year, quarter, version) for the quarter containing ``today`` (UTC)."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    quarter = (today.month - 1) // 3 + 1
    return today.year, quarter, f"{today.year}-{_quarter_month(quarter)}"


def get_current_supported_api_versions(today: Optional[date] = None) -> List[str]:
    """List the API versions that are currently supported.

    Versions are released quarterly and each one is supported for a year, so
    the list holds the three previous releases, the current one, the upcoming
    release candidate and ``unstable``.

    Args:
        today: Reference date, defaults to the current UTC date

    Returns:
        Version strings, oldest first
    """
    year, quarter, current_version = get_current_api_version(today)
    if quarter == 4:
        next_version = f"{year + 1}-01"
    else:
        next_version = f"{year}-{_quarter_month(quarter + 1)}"

    return [
        _previous_version(year, quarter, 3),
        _previous_version(year, quarter, 2),
        _previous_version(year, quarter, 1),
        current_version,
        next_version,
        UNSTABLE_API_VERSION,
    ]
