from blockly.scheduling.errors import InvalidTimeRange
from blockly.scheduling.timeutils import to_minutes

def validate_time_range(start: str, end: str) -> None:
    # No overnight blocks: a block or lunch window must end after it starts
    if to_minutes(end) <= to_minutes(start):
        raise InvalidTimeRange(f"end time {end} must be after start time {start}")
