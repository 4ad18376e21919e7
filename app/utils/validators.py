import re
from datetime import datetime, timedelta

TIME_PATTERN = re.compile(r'([01]\d|2[0-3]):([0-5]\d)')

def validate_time(value: str) -> bool:
    """Validate a 24-hour HH:MM wall-clock string"""
    return bool(value and TIME_PATTERN.fullmatch(value))

def times_overlap(start_a: str, end_a: str, start_b: str, end_b: str) -> bool:
    """Half-open [start, end) intersection on zero-padded HH:MM strings"""
    return start_a < end_b and start_b < end_a

def day_bounds(value):
    """Return [midnight, next midnight) for the day containing value"""
    start = datetime(value.year, value.month, value.day)
    return start, start + timedelta(days=1)

def combine_date_and_time(day: datetime, time_value: str) -> datetime:
    hours, minutes = time_value.split(":")
    return datetime(day.year, day.month, day.day, int(hours), int(minutes))
