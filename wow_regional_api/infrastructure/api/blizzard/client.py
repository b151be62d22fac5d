"""
Blizzard Regional API Client

Region-aware client for the World of Warcraft game-data API with a disk
cache for realm lists and character profiles.
"""

import logging
import time
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Dict, Any, List, Mapping

import httpx
from pydantic import ValidationError

from ....core.config import ClientSettings, ConfigLoader
from ....core.exceptions import CacheError, RegionError, TransportError
from ....core.models import (
    CachedCharacter,
    RegionInfo,
    SelectedRegion,
    dump_region_set,
)
from ....core.protocols import JSONStoreProtocol
from ...cache import JSONFileStore
from ..base_client import BaseAPIClient
from .auth import create_authenticator
from .endpoints import (
    ENDPOINT_REALM,
    append_params,
    character_endpoint,
    quote_name,
    spell_endpoint,
)
from .models import RealmStatus

logger = logging.getLogger(__name__)


class RegionalAPIClient:
    """
    Connection to one regional API at a time.

    Blocking and not safe for concurrent use; give each thread its own
    instance.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.Client] = None,
        store: Optional[JSONStoreProtocol] = None
    ):
        """
        Load credentials and region data and select the first region.

        Args:
            settings: Client settings, loaded from the environment if omitted
            http_client: httpx client to send requests with
            store: File store for region data, characters and icons

        Raises:
            ConfigurationError: If the credentials or region data are unusable
        """
        self.settings = settings or ConfigLoader.load_settings()
        self.store = store or JSONFileStore()
        self.transport = BaseAPIClient(timeout=self.settings.timeout, client=http_client)

        loader = ConfigLoader(self.settings, self.store)
        self.credentials = loader.load_credentials()
        self._regions = loader.load_regions()
        self._region_ids: List[str] = list(self._regions)

        self.auth = create_authenticator(self.credentials, self.transport)

        self._selected: Optional[SelectedRegion] = None

        # Default to first region in the file
        self.select_region(self._region_ids[0])

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Release the HTTP connection pool."""
        self.transport.close()

    # Region selection
    def select_region(self, region_id: str) -> None:
        """
        Set the region to use for requests.

        The ID is not checked against the region set; use
        ``is_valid_region`` first. An unknown ID raises RegionError once
        region data is needed.
        """
        api_url = self.settings.api_url_for(self.auth.mode).format(
            region=region_id,
            locale=self.settings.locale,
            endpoint="{endpoint}",
            credential="{credential}"
        )
        token_url = self.settings.token_url.format(region=region_id)

        self._selected = SelectedRegion(
            region_id=region_id,
            api_url=api_url,
            token_url=token_url
        )
        logger.debug(f"Selected region {region_id}")

    def get_regions(self) -> Mapping[str, RegionInfo]:
        """Return data for all regions (read-only view)."""
        return MappingProxyType(self._regions)

    def get_region_ids(self) -> List[str]:
        """Return all available region IDs."""
        return list(self._region_ids)

    def get_selected_region_id(self) -> str:
        """Get the selected region ID."""
        return self._selected.region_id

    def get_region_name(self) -> str:
        """Get the selected region's display name."""
        return self._selected_info().name

    def _selected_info(self) -> RegionInfo:
        """Look up the selected region in the region set."""
        try:
            return self._regions[self._selected.region_id]
        except KeyError:
            raise RegionError(self._selected.region_id)

    # Realms
    def get_realms(self, update_cache: bool = False) -> Dict[str, str]:
        """
        Obtain the realm list for the selected region.

        Args:
            update_cache: Refresh from the API and rewrite the region file

        Returns:
            Realm slug -> realm name
        """
        info = self._selected_info()

        if update_cache:
            data = self._request_endpoint(ENDPOINT_REALM)
            try:
                status = RealmStatus.model_validate(data)
            except ValidationError as e:
                raise TransportError(
                    "Unexpected realm status response",
                    url=ENDPOINT_REALM,
                    original_exception=e
                )

            info.realms = status.to_mapping()
            self.store.write_json(self.settings.region_path, dump_region_set(self._regions))
            logger.info(
                f"Refreshed {len(info.realms)} realms for region "
                f"{self._selected.region_id}"
            )

        return dict(info.realms)

    # Characters
    def get_character(self, character: str, realm: str) -> Any:
        """
        Obtain character data, subject to caching.

        A cached profile younger than ``cache_time`` is returned without a
        request. Empty responses are returned but not cached.
        """
        realm_dir = self._character_dir(realm)
        character_file = realm_dir / f"{quote_name(character)}.json"

        if self.store.exists(character_file):
            cached = self._read_cached_character(character_file)
            if cached and cached.is_fresh(time.time(), self.settings.cache_time):
                logger.debug(f"Cache hit for character {character}-{realm}")
                return cached.data

        self.store.ensure_directory(realm_dir)

        res = self._request_endpoint(
            character_endpoint(realm, character),
            {"fields": self.settings.character_fields}
        )

        if res:
            entry = CachedCharacter(cache_time=int(time.time()), data=res)
            self.store.write_json(character_file, entry.to_json())
            logger.info(f"Cached character {character}-{realm}")

        return res

    def _character_dir(self, realm: str) -> Path:
        return self.settings.characters_dir / f"{self._selected.region_id}-{realm}"

    def _read_cached_character(self, path: Path) -> Optional[CachedCharacter]:
        """Read a cache file, treating unreadable entries as missing."""
        try:
            return CachedCharacter.model_validate(self.store.read_json(path))
        except (CacheError, ValidationError) as e:
            logger.warning(f"Ignoring unusable character cache {path}: {e}")
            return None

    # Spells
    def get_spell(self, spell_id: int) -> Any:
        """
        Obtain information for a spell.

        Data returned from this method is not cached.
        """
        return self._request_endpoint(spell_endpoint(spell_id))

    # Icons
    def get_icon_image_path(
        self,
        icon_id: str,
        size: Optional[int] = None,
        download: bool = False,
        directory: Optional[str] = None
    ) -> Optional[Path]:
        """
        Obtain the path to an icon file by ID.

        Args:
            icon_id: Icon name
            size: Icon size, defaults to ``default_icon_size`` (36)
            download: Download from the region CDN if not stored locally
            directory: Custom directory to use instead of ``icons_dir/<size>``

        Returns:
            Path to the icon, or None if it is not available
        """
        size = int(size or self.settings.default_icon_size)

        if directory is None:
            icon_dir = self.settings.icons_dir / str(size)
        else:
            icon_dir = Path(directory)

        self.store.ensure_directory(icon_dir)
        path = icon_dir / f"{icon_id}.jpg"

        if self.store.exists(path):
            return path

        if download:
            url = self.settings.icon_url.format(
                region=self._selected.region_id,
                size=size,
                icon_id=icon_id
            )
            try:
                content = self.transport.get_bytes(url)
            except TransportError as e:
                logger.warning(f"Unable to download icon {icon_id}: {e}")
                return None

            self.store.write_bytes(path, content)
            logger.info(f"Downloaded icon {icon_id} ({size}px)")
            return path

        return None

    # Validation
    @staticmethod
    def is_valid_character_name(character_name: Any) -> bool:
        """Check a character name is a string of 2 to 24 characters."""
        if not isinstance(character_name, str):
            return False

        return 2 <= len(character_name) <= 24

    def is_valid_region(self, region_tag: Any) -> bool:
        """Verify a region ID is known."""
        if not isinstance(region_tag, str):
            return False

        return region_tag in self._region_ids

    def is_valid_realm(self, realm: Any) -> bool:
        """Verify a realm slug exists in the selected region."""
        if not isinstance(realm, str):
            return False

        return realm in self.get_realms(False)

    # Requests
    def _request_endpoint(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Request an endpoint from the selected region's API."""
        url = self._format_endpoint_url(endpoint, params)
        logger.info(f"Requesting {endpoint} from region {self._selected.region_id}")
        return self.transport.get_json(url)

    def _format_endpoint_url(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> str:
        """Build the authenticated URL for an endpoint."""
        credential = self.auth.get_credential(self._selected)
        url = self._selected.endpoint_url(endpoint, quote_name(credential))
        return append_params(url, params)
