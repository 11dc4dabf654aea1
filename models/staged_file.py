"""Staged upload model."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class StagedFile:
    """An accepted upload written to the staging directory."""

    field_name: str
    original_filename: str
    content_type: str
    size: int
    path: Path

    @property
    def size_mb(self) -> float:
        return self.size / (1024 * 1024)

    def to_log_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["path"] = str(self.path)
        data["size_mb"] = round(self.size_mb, 2)
        return data
