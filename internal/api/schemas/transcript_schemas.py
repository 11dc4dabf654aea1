"""
Transcript API schemas.

Field names follow the JSON the web client sends (camelCase). Podcast and
episode objects come from an upstream validation step and are passed through
as-is.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Seconds, or a player clock string ("MM:SS" / "HH:MM:SS")
TimestampValue = Union[int, float, str]


class TimeRange(BaseModel):
    """Absolute window into the episode audio, in seconds."""

    start: TimestampValue = Field(..., description="Window start")
    end: TimestampValue = Field(..., description="Window end")


class TranscriptRequest(BaseModel):
    """Request body for POST /api/transcript."""

    model_config = ConfigDict(extra="allow")

    podcastInfo: Optional[Dict[str, Any]] = Field(
        default=None,
        description="{validatedPodcast, validatedEpisode}",
        examples=[
            {
                "validatedPodcast": {"id": 1200361736, "title": "The Daily"},
                "validatedEpisode": {"guid": "abc", "title": "Episode title"},
            }
        ],
    )
    timestamp: Optional[TimestampValue] = Field(
        default=None, description="Point in the episode", examples=[120, "2:00"]
    )
    timeRange: Optional[TimeRange] = Field(
        default=None, description="Optional explicit window"
    )

    def time_range_dict(self) -> Optional[Dict[str, Any]]:
        return self.timeRange.model_dump() if self.timeRange else None


class GenerateTranscriptRequest(BaseModel):
    """Request body for POST /api/transcript/generate."""

    audioUrl: Optional[str] = Field(default=None, description="Audio URL to transcribe")
    startTime: Optional[TimestampValue] = Field(default=None, description="Window start")
    endTime: Optional[TimestampValue] = Field(default=None, description="Window end")
