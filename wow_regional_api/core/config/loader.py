"""
Configuration Loader

Handles loading and validation of credentials and region data.
"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any

from dotenv import load_dotenv
from pydantic import ValidationError

from .settings import ClientSettings
from ..exceptions import ConfigurationError, CacheError
from ..models import (
    Credentials,
    StaticKeyCredentials,
    OAuthCredentials,
    RegionInfo,
    RegionSet,
)
from ..protocols import JSONStoreProtocol

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads credentials and region data from the config directory."""

    def __init__(
        self,
        settings: ClientSettings,
        store: Optional[JSONStoreProtocol] = None
    ):
        """
        Initialize the loader.

        Args:
            settings: Client settings holding the file locations
            store: JSON store used to read the files
        """
        if store is None:
            from ...infrastructure.cache import JSONFileStore
            store = JSONFileStore()

        self.settings = settings
        self.store = store

    @classmethod
    def load_settings(
        cls,
        env_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None
    ) -> ClientSettings:
        """
        Load settings from the environment.

        Args:
            env_file: Path to a .env file to load first
            overrides: Field values taking precedence over the environment

        Returns:
            Loaded settings
        """
        if env_file:
            load_dotenv(env_file)

        try:
            settings = ClientSettings(**(overrides or {}))
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid client settings: {e}",
                original_exception=e
            )

        logger.info(
            f"Settings loaded (config_dir={settings.config_dir}, "
            f"locale={settings.locale})"
        )
        return settings

    def load_credentials(self) -> Credentials:
        """
        Load API credentials.

        OAuth mode is used when the file defines ``clientKey`` or
        ``clientSecret``, static key mode otherwise, unless the settings
        pin a mode.

        Returns:
            Static key or OAuth credentials

        Raises:
            ConfigurationError: If the file is missing or incomplete
        """
        config = self._read_object(self.settings.api_config_path, "API configuration file")

        mode = self.settings.auth_mode
        if mode is None:
            mode = "oauth" if ("clientKey" in config or "clientSecret" in config) else "key"

        if mode == "oauth":
            client_key = self._require_string(config, "clientKey")
            client_secret = self._require_string(config, "clientSecret")
            credentials = OAuthCredentials(client_key=client_key, client_secret=client_secret)
        else:
            credentials = StaticKeyCredentials(key=self._require_string(config, "key"))

        logger.info(f"Loaded API credentials (mode={credentials.mode})")
        return credentials

    def load_regions(self) -> RegionSet:
        """
        Load region data.

        Returns:
            Region ID to region info, in file order

        Raises:
            ConfigurationError: If the file is missing, malformed or empty
        """
        data = self._read_object(self.settings.region_path, "region data file")

        # Ensure the data file has at least one region
        if not data:
            raise ConfigurationError(
                "Region data file does not define any regions",
                config_key="regions"
            )

        regions: RegionSet = {}
        for region_id, entry in data.items():
            try:
                regions[region_id] = RegionInfo.model_validate(entry)
            except ValidationError as e:
                raise ConfigurationError(
                    f"Region `{region_id}` is malformed: {e}",
                    config_key=region_id,
                    original_exception=e
                )

        logger.info(f"Loaded {len(regions)} regions: {', '.join(regions)}")
        return regions

    def _read_object(self, path: Path, label: str) -> Dict[str, Any]:
        """Read a JSON file that must hold an object."""
        if not self.store.exists(path):
            raise ConfigurationError(
                f"Unable to locate {label} {path}",
                details={"path": str(path)}
            )

        try:
            data = self.store.read_json(path)
        except CacheError as e:
            raise ConfigurationError(
                f"Unable to load {label} {path}: {e.message}",
                details={"path": str(path)},
                original_exception=e
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"The {label} {path} must contain a JSON object",
                details={"path": str(path)}
            )
        return data

    @staticmethod
    def _require_string(config: Dict[str, Any], key: str) -> str:
        """Get a required string property from the credentials file."""
        value = config.get(key)
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Configuration file does not define API property `{key}`",
                config_key=key
            )
        return value
