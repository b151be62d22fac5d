"""
Store Protocol Definition

Defines the interface for on-disk persistence used by the client.
"""

from pathlib import Path
from typing import Protocol, Any, Union, runtime_checkable

PathLike = Union[str, Path]


@runtime_checkable
class JSONStoreProtocol(Protocol):
    """Protocol for JSON and binary file storage."""

    def exists(self, path: PathLike) -> bool:
        """
        Check if a file exists.

        Args:
            path: File path

        Returns:
            True if the file exists
        """
        ...

    def ensure_directory(self, path: PathLike) -> Path:
        """
        Create a directory and its parents if missing.

        Args:
            path: Directory path

        Returns:
            The directory path
        """
        ...

    def read_json(self, path: PathLike) -> Any:
        """
        Read and decode a JSON file.

        Args:
            path: File path

        Returns:
            Decoded JSON value
        """
        ...

    def write_json(self, path: PathLike, value: Any) -> None:
        """
        Encode and write a JSON file.

        Args:
            path: File path
            value: JSON-serializable value
        """
        ...

    def write_bytes(self, path: PathLike, content: bytes) -> None:
        """
        Write a binary file.

        Args:
            path: File path
            content: Raw bytes
        """
        ...
