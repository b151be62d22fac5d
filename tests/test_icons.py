"""Tests for icon path resolution and download."""

from .conftest import ICON_HOST

ICON_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


class TestGetIconImagePath:
    """Tests for RegionalAPIClient.get_icon_image_path."""

    def test_stored_icon_skips_network(self, api, fake_api, settings):
        icon = settings.icons_dir / "36" / "inv_sword_04.jpg"
        icon.parent.mkdir(parents=True)
        icon.write_bytes(ICON_BYTES)

        assert api.get_icon_image_path("inv_sword_04", download=True) == icon
        assert fake_api.requests == []

    def test_missing_icon_without_download(self, api, fake_api, settings):
        assert api.get_icon_image_path("inv_sword_04") is None

        assert (settings.icons_dir / "36").is_dir()
        assert fake_api.requests == []

    def test_download(self, api, fake_api, settings):
        fake_api.route("GET", ICON_HOST, "/icons/56/inv_sword_04.jpg", content=ICON_BYTES)

        path = api.get_icon_image_path("inv_sword_04", size=56, download=True)

        assert path == settings.icons_dir / "56" / "inv_sword_04.jpg"
        assert path.read_bytes() == ICON_BYTES
        # The CDN is not authenticated
        assert fake_api.sent("POST") == []

    def test_failed_download(self, api, settings):
        assert api.get_icon_image_path("does_not_exist", download=True) is None
        assert not (settings.icons_dir / "36" / "does_not_exist.jpg").exists()

    def test_custom_directory(self, api, fake_api, tmp_path):
        fake_api.route("GET", ICON_HOST, "/icons/36/inv_misc_qmark.jpg", content=ICON_BYTES)
        custom = tmp_path / "static" / "img"

        path = api.get_icon_image_path("inv_misc_qmark", download=True, directory=str(custom))

        assert path == custom / "inv_misc_qmark.jpg"
        assert path.read_bytes() == ICON_BYTES

    def test_download_uses_selected_region(self, api, fake_api, settings):
        fake_api.route("GET", "render-us.worldofwarcraft.com", "/icons/36/spell_fire_flamebolt.jpg", content=ICON_BYTES)
        api.select_region("us")

        path = api.get_icon_image_path("spell_fire_flamebolt", download=True)

        assert path == settings.icons_dir / "36" / "spell_fire_flamebolt.jpg"
