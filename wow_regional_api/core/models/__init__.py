"""
Core Model Definitions

Region, credential and cache models for the client.
"""

from .region import RegionInfo, RegionSet, SelectedRegion, dump_region_set
from .credentials import Credentials, StaticKeyCredentials, OAuthCredentials
from .character import CachedCharacter

__all__ = [
    "RegionInfo",
    "RegionSet",
    "SelectedRegion",
    "dump_region_set",
    "Credentials",
    "StaticKeyCredentials",
    "OAuthCredentials",
    "CachedCharacter",
]
