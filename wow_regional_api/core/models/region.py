"""
Region Models

Region metadata loaded from the region data file.
"""

from dataclasses import dataclass
from typing import Dict, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegionInfo(BaseModel):
    """Display name and realm list of one region."""

    name: str
    realms: Dict[str, str] = Field(default_factory=dict)

    # Keep unknown keys so a rewrite of the region file does not drop them
    model_config = ConfigDict(extra="allow")

    @field_validator("realms", mode="before")
    @classmethod
    def default_realms(cls, v):
        """Treat a null realm list as empty."""
        return {} if v is None else v


# Region ID -> RegionInfo, in file order
RegionSet = Dict[str, RegionInfo]


def dump_region_set(regions: RegionSet) -> Dict[str, Any]:
    """Convert a region set back into its JSON file form."""
    return {
        region_id: info.model_dump()
        for region_id, info in regions.items()
    }


@dataclass(frozen=True)
class SelectedRegion:
    """
    The active region and its precomputed URLs.

    RegionInfo is not copied here; it is looked up in the client's region
    set by ``region_id`` so realm updates are visible from both sides.
    """

    region_id: str
    api_url: str
    token_url: str

    def endpoint_url(self, endpoint: str, credential: str) -> str:
        """Fill the endpoint and credential into the API URL template."""
        return self.api_url.format(endpoint=endpoint, credential=credential)
