"""
Cache Infrastructure

On-disk storage for region data, character profiles and icons.
"""

from .json_file_store import JSONFileStore

__all__ = [
    "JSONFileStore",
]
