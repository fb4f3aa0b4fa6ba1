from __future__ import annotations

import re
from datetime import datetime

from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError

_MONTH_INPUT = re.compile(r"^(\d{4})-(\d{1,2})$")


def format_month_label(value: str) -> str:
    """Turn a ``YYYY-MM`` month input into the stored ``MonthName/YYYY`` label.

    >>> format_month_label("2023-05")
    'Maio/2023'
    """
    match = _MONTH_INPUT.match(value.strip())
    if not match:
        raise ValidationError("Mês inválido (use AAAA-MM)")

    year, month = match.group(1), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValidationError("Mês inválido (use AAAA-MM)")
    return f"{MONTH_NAMES[month - 1]}/{year}"


def epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()
