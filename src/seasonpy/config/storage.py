"""Where seasonpy keeps its library database, HTTP cache and season files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "seasonpy"
DEFAULT_DB_FILENAME: Final[str] = "seasonpy.db"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"
SEASON_DIR_NAME: Final[str] = "season"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME
    http_cache_filename: str = HTTP_CACHE_FILENAME
    season_dir_name: str = SEASON_DIR_NAME

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def _under_data_dir(self, name: str, *, create_parent: bool) -> Path:
        root = self.resolve_data_dir()
        if create_parent:
            root.mkdir(parents=True, exist_ok=True)
        return root / name

    def database_path(self, *, ensure: bool = True) -> Path:
        return self._under_data_dir(self.database_filename, create_parent=ensure)

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        return self._under_data_dir(self.http_cache_filename, create_parent=ensure)

    def season_directory(self, *, ensure: bool = True) -> Path:
        """Directory holding the downloaded ``{year}_{season}.xml`` files."""

        directory = self._under_data_dir(self.season_dir_name, create_parent=ensure)
        if ensure:
            directory.mkdir(exist_ok=True)
        return directory

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        local_app_data = os.getenv("LOCALAPPDATA")
        return Path(local_app_data) if local_app_data else Path.home() / "AppData" / "Local"
    xdg_data_home = os.getenv("XDG_DATA_HOME")
    return Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    """Use ``SEASONPY_DATA_DIR`` when set, else the platform's per-user data directory."""

    override = os.getenv("SEASONPY_DATA_DIR")
    if override:
        return StorageConfig(data_dir=Path(override))
    return StorageConfig(data_dir=(_platform_data_home() / APP_DIR_NAME).expanduser().resolve())


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    """``DATABASE_URI`` wins over the SQLite file inside the data directory."""

    uri = os.getenv("DATABASE_URI") or (storage or get_storage_config()).database_uri()
    return DatabaseConfig(uri=uri)
