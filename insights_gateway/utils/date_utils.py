"""Date manipulation utilities"""

from datetime import date


def month_key(day: date) -> str:
    """Calendar month of a date as YYYY-MM"""
    return f"{day.year:04d}-{day.month:02d}"


def add_months(key: str, months: int) -> str:
    """Shift a YYYY-MM month key by a number of months (may be negative)"""
    year, month = (int(part) for part in key.split("-"))
    index = year * 12 + (month - 1) + months
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def months_between(start: date, end: date) -> int:
    """Number of calendar months touched by [start, end], at least 1"""
    months = (end.year - start.year) * 12 + (end.month - start.month) + 1
    return max(1, months)
