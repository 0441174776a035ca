# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, Protocol

from gleaning import configuration


class BlobStore(Protocol):
    """Opaque string storage keyed by collection name."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class FileBlobStore:
    """
    Stores each key as `<key>.yaml` in the data directory.

    The directory is resolved on every call so that a data_path configured
    after import is honoured.
    """

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = base_path

    @property
    def base_path(self) -> Path:
        if self._base_path is not None:
            return self._base_path
        return configuration.DATA_PATH

    def path_for(self, key: str) -> Path:
        return self.base_path / f"{key}.yaml"

    def get(self, key: str) -> Optional[str]:
        file_path = self.path_for(key)
        if not file_path.is_file():
            return None
        return file_path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.base_path.mkdir(parents=True, exist_ok=True)
        file_path = self.path_for(key)
        # Write beside the target then swap, so a crash never leaves half a file
        temp_path = file_path.with_suffix(".yaml.tmp")
        temp_path.write_text(value, encoding="utf-8")
        temp_path.replace(file_path)


class MemoryBlobStore:
    def __init__(self, blobs: Optional[dict[str, str]] = None) -> None:
        self.blobs: dict[str, str] = dict(blobs) if blobs is not None else {}

    def get(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self.blobs[key] = value
