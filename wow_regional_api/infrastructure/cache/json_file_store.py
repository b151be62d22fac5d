"""
JSON File Store

Disk-backed implementation of JSONStoreProtocol used for the region file,
the character cache and downloaded icons.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ...core.protocols import JSONStoreProtocol
from ...core.protocols.store_protocol import PathLike
from ...core.exceptions import CacheError

logger = logging.getLogger(__name__)


class JSONFileStore(JSONStoreProtocol):
    """Reads and writes JSON and binary files with atomic replacement."""

    def __init__(self, indent: int = 4, encoding: str = "utf-8"):
        """
        Initialize the store.

        Args:
            indent: JSON indentation used when writing
            encoding: Text encoding of JSON files
        """
        self.indent = indent
        self.encoding = encoding

    def exists(self, path: PathLike) -> bool:
        """Check if a file exists."""
        return Path(path).is_file()

    def ensure_directory(self, path: PathLike) -> Path:
        """Create a directory and its parents if missing."""
        directory = Path(path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(
                f"Unable to create directory {directory}: {e}",
                path=str(directory),
                original_exception=e
            )
        return directory

    def read_json(self, path: PathLike) -> Any:
        """Read and decode a JSON file."""
        path = Path(path)
        try:
            with path.open("r", encoding=self.encoding) as handle:
                return json.load(handle)
        except OSError as e:
            raise CacheError(
                f"Unable to read {path}: {e}",
                path=str(path),
                original_exception=e
            )
        except ValueError as e:
            raise CacheError(
                f"Invalid JSON in {path}: {e}",
                path=str(path),
                original_exception=e
            )

    def write_json(self, path: PathLike, value: Any) -> None:
        """Encode and write a JSON file."""
        try:
            encoded = json.dumps(value, indent=self.indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CacheError(
                f"Value for {path} is not JSON serializable: {e}",
                path=str(path),
                original_exception=e
            )

        self._write_atomic(Path(path), encoded.encode(self.encoding))
        logger.debug(f"Wrote JSON file {path}")

    def write_bytes(self, path: PathLike, content: bytes) -> None:
        """Write a binary file."""
        self._write_atomic(Path(path), content)
        logger.debug(f"Wrote {len(content)} bytes to {path}")

    def _write_atomic(self, path: Path, content: bytes) -> None:
        """Write to a temp file in the target directory, then rename over the target."""
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False
            ) as handle:
                tmp_name = handle.name
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheError(
                f"Unable to write {path}: {e}",
                path=str(path),
                original_exception=e
            )
