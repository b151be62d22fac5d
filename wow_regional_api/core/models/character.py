"""
Cached Character Model

On-disk form of a cached character profile.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CachedCharacter(BaseModel):
    """Character payload with the Unix time it was fetched."""

    cache_time: int = Field(alias="cacheTime")
    data: Any = None

    model_config = ConfigDict(populate_by_name=True)

    def is_fresh(self, now: float, max_age: int) -> bool:
        """Check if the entry is younger than ``max_age`` seconds."""
        return now - self.cache_time < max_age

    def to_json(self) -> dict:
        """Convert to the JSON object written to disk."""
        return self.model_dump(by_alias=True)
