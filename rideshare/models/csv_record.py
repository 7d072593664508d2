"""Shared base for entities built from flat CSV rows."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


class RecordLoadError(Exception):
    """Raised when the raw tables cannot be read."""
    pass


class MalformedRecordError(RecordLoadError, ValueError):
    """Raised when a single row fails field validation."""
    pass


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_field(record: Dict[str, Any], field: str) -> Any:
    """Get a field from a raw row, failing if it is missing or empty."""
    value = record.get(field)
    if _blank(value):
        raise MalformedRecordError(f"Missing required field '{field}' in record {record!r}")
    return value.strip() if isinstance(value, str) else value


def optional_field(record: Dict[str, Any], field: str) -> Any:
    """Get a nullable field from a raw row; blank cells become None."""
    value = record.get(field)
    if _blank(value):
        return None
    return value.strip() if isinstance(value, str) else value


def parse_identifier(value: Any, field: str = "id") -> int:
    """Parse a positive integer identifier."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise MalformedRecordError(f"Field '{field}' must be an integer, got {value!r}")
    try:
        identifier = int(value)
    except (TypeError, ValueError, OverflowError):
        raise MalformedRecordError(f"Field '{field}' must be an integer, got {value!r}")

    if identifier <= 0:
        raise MalformedRecordError(f"Field '{field}' must be positive, got {identifier}")
    return identifier


def parse_timestamp(value: Any, field: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 timestamp. None passes through.

    Values with a UTC offset are converted to naive local time, the same
    convention as datetime.now(), so every stored timestamp is comparable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        timestamp = value
    else:
        try:
            timestamp = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            raise MalformedRecordError(f"Field '{field}' is not an ISO 8601 timestamp: {value!r}")

    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone().replace(tzinfo=None)
    return timestamp


def parse_cost(value: Any) -> Optional[float]:
    """Parse a non-negative trip cost. None passes through."""
    if value is None:
        return None
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise MalformedRecordError(f"Field 'cost' must be a number, got {value!r}")

    if not math.isfinite(cost):
        raise MalformedRecordError(f"Field 'cost' must be a finite number, got {value!r}")
    if cost < 0:
        raise MalformedRecordError(f"Field 'cost' must not be negative, got {cost}")
    return cost


def parse_rating(value: Any) -> Optional[int]:
    """Parse a 1-5 trip rating. None passes through."""
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise MalformedRecordError(f"Field 'rating' must be an integer, got {value!r}")
    if value is None:
        return None
    try:
        rating = int(value)
    except (TypeError, ValueError, OverflowError):
        raise MalformedRecordError(f"Field 'rating' must be an integer, got {value!r}")

    if not 1 <= rating <= 5:
        raise MalformedRecordError(f"Field 'rating' must be between 1 and 5, got {rating}")
    return rating


@dataclass(eq=False)
class CsvRecord:
    """
    Base for every entity loaded from a table.

    Entities compare by identity: the dispatcher owns exactly one object per
    identifier and every holder shares it.

    Attributes:
        id: Positive integer identifier, unique within its table
    """
    id: int

    def __post_init__(self):
        """Validate the identifier."""
        self.id = parse_identifier(self.id)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CsvRecord":
        """Build an entity from a raw field map."""
        raise NotImplementedError(f"{cls.__name__} does not implement from_record")
