"""
Transcript window - the slice of episode audio to transcribe.

Timestamps arrive either as seconds or as player-style clock strings
("MM:SS", "HH:MM:SS") read off a screenshot.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from core.errors import ValidationError
from core.messages import ErrorMessages

Timestamp = Union[int, float, str]


def parse_timestamp(timestamp: Timestamp) -> float:
    """
    Convert a timestamp to seconds.

    Args:
        timestamp: Seconds (number or numeric string), "MM:SS" or "HH:MM:SS"

    Returns:
        Seconds as float

    Raises:
        ValidationError: If the timestamp cannot be parsed or is negative
    """
    if isinstance(timestamp, bool):
        raise ValidationError(ErrorMessages.INVALID_TIMESTAMP.format(timestamp=timestamp))

    if isinstance(timestamp, (int, float)):
        seconds = float(timestamp)
    else:
        text = str(timestamp).strip()
        parts = text.split(":")
        try:
            if len(parts) == 1:
                seconds = float(text)
            elif len(parts) == 2:
                seconds = int(parts[0]) * 60 + float(parts[1])
            elif len(parts) == 3:
                seconds = int(parts[0]) * 3600 + int(parts[1]) * 60 + float(parts[2])
            else:
                raise ValueError(text)
        except ValueError:
            raise ValidationError(
                ErrorMessages.INVALID_TIMESTAMP.format(timestamp=timestamp)
            )

    if seconds < 0:
        raise ValidationError(ErrorMessages.INVALID_TIMESTAMP.format(timestamp=timestamp))
    return seconds


@dataclass(frozen=True)
class TranscriptWindow:
    """Audio window in milliseconds, as transcription providers expect."""

    start_ms: int
    end_ms: int

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    @classmethod
    def build(
        cls,
        timestamp: Optional[Timestamp],
        time_range: Optional[Mapping[str, Any]],
        before: float,
        after: float,
    ) -> Optional["TranscriptWindow"]:
        """
        Build the window for a request.

        An explicit ``time_range`` ({"start", "end"} in seconds) wins. Otherwise
        the window spans ``before``/``after`` seconds around ``timestamp``.
        Returns None when neither is given (whole episode).
        """
        if time_range and time_range.get("start") is not None and time_range.get("end") is not None:
            start = parse_timestamp(time_range["start"])
            end = parse_timestamp(time_range["end"])
            if end <= start:
                raise ValidationError(ErrorMessages.INVALID_TIME_RANGE)
            return cls(start_ms=int(start * 1000), end_ms=int(end * 1000))

        if timestamp is None or timestamp == "":
            return None

        seconds = parse_timestamp(timestamp)
        start = max(0.0, seconds - before)
        return cls(start_ms=int(start * 1000), end_ms=int((seconds + after) * 1000))

    def to_dict(self) -> dict:
        return {
            "startMs": self.start_ms,
            "endMs": self.end_ms,
            "durationMs": self.duration_ms,
        }
