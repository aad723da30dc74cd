from __future__ import annotations

import math
from datetime import datetime, time
from typing import Iterable, List, Optional, Sequence, Union

from blockly.scheduling.records import ScheduleBlock, ScheduleType, TimelineStatus
from blockly.scheduling.timeutils import to_minutes


def minutes_of_day(moment: Union[datetime, time]) -> int:
    return int(moment.hour) * 60 + int(moment.minute)


def blocks_for(t: Optional[ScheduleType], all_blocks: Iterable[ScheduleBlock]) -> List[ScheduleBlock]:
    """Blocks belonging to a schedule type, ordered by block_index."""
    if t is None:
        return []
    own = [b for b in all_blocks if b.schedule_type_id == t.id]
    return sorted(own, key=lambda b: b.block_index)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def day_progress(blocks: Sequence[ScheduleBlock], now_minutes: int) -> Optional[int]:
    """
    Percent of the school day elapsed, from the first block's start to the
    last block's end. None when there are no blocks.
    """
    if not blocks:
        return None

    day_start = to_minutes(blocks[0].start_time)
    day_end = to_minutes(blocks[-1].end_time)

    if now_minutes < day_start:
        return 0
    if now_minutes >= day_end:
        return 100
    span = day_end - day_start
    if span <= 0:
        return 100

    pct = _round_half_up(100 * (now_minutes - day_start) / span)
    return max(0, min(100, pct))


def timeline_status(blocks: Sequence[ScheduleBlock], now_minutes: int) -> TimelineStatus:
    """
    Where `now_minutes` sits on an ordered block list.
      current: first block with start <= now < end
      next:    only when nothing is current, first block starting after now
    """
    current: Optional[str] = None
    nxt: Optional[str] = None

    for b in blocks:
        if to_minutes(b.start_time) <= now_minutes < to_minutes(b.end_time):
            current = b.id
            break

    if current is None:
        for b in blocks:
            if to_minutes(b.start_time) > now_minutes:
                nxt = b.id
                break

    return TimelineStatus(
        current=current,
        next=nxt,
        progress_percent=day_progress(blocks, now_minutes),
    )
