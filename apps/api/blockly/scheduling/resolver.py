from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Optional, Sequence, Tuple

from blockly.scheduling.records import ScheduleOverride, ScheduleType
from blockly.scheduling.timeutils import EPOCH, DateLike, day_offset, is_weekend, parse_date

logger = logging.getLogger(__name__)

# Name fragments (lowercase) that mark the two halves of an A/B rotation.
AB_A = ("day a", "a day", "a-day")
AB_B = ("day b", "b day", "b-day")

HOLIDAY_MARKER = "holiday"


def _name_has(t: ScheduleType, needles: Sequence[str]) -> bool:
    lowered = t.name.lower()
    return any(n in lowered for n in needles)


def find_ab_types(types: Sequence[ScheduleType]) -> Tuple[Optional[ScheduleType], Optional[ScheduleType]]:
    """First "A" type and first "B" type in catalog order (either may be None)."""
    type_a = next((t for t in types if _name_has(t, AB_A)), None)
    type_b = next((t for t in types if _name_has(t, AB_B)), None)
    return type_a, type_b


def is_holiday(t: Optional[ScheduleType]) -> bool:
    return t is not None and HOLIDAY_MARKER in t.name.lower()


def _find_type(types: Sequence[ScheduleType], type_id: Optional[str]) -> Optional[ScheduleType]:
    if not type_id:
        return None
    return next((t for t in types if t.id == type_id), None)


def resolve(
    d: DateLike,
    types: Sequence[ScheduleType],
    overrides: Mapping[date, ScheduleOverride],
    default_schedule_id: Optional[str] = None,
) -> Optional[ScheduleType]:
    """
    Pick the schedule type that governs a date.

    Precedence:
      1. weekend -> None (an override on a weekend is ignored)
      2. override for the date, if its type still exists
      3. manual default (default_schedule_id), if it exists
      4. A/B alternation by parity of days since EPOCH
      5. first type in catalog order, or None for an empty catalog
    """
    day = parse_date(d)
    if is_weekend(day):
        return None

    ov = overrides.get(day)
    if ov is not None:
        found = _find_type(types, ov.schedule_type_id)
        if found is not None:
            return found
        logger.debug(
            "Override %s on %s points to missing schedule type %s; falling back",
            ov.id, day, ov.schedule_type_id,
        )

    manual = _find_type(types, default_schedule_id)
    if manual is not None:
        return manual

    type_a, type_b = find_ab_types(types)
    if type_a is not None and type_b is not None:
        return type_a if day_offset(day, EPOCH) % 2 == 0 else type_b

    return types[0] if types else None
