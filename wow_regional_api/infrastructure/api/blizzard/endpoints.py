"""
Blizzard API Endpoints

Endpoint paths and URL formatting for the regional game-data API.
"""

from typing import Optional, Mapping, Any
from urllib.parse import quote_plus

ENDPOINT_REALM = "realm/status"
ENDPOINT_CHARACTER = "character/{realm}/{character}"
ENDPOINT_SPELL = "spell/{spell_id}"

URL_PARAM = "&{key}={value}"


def quote_name(name: str) -> str:
    """URL-encode a name for use in a path or file name."""
    return quote_plus(name)


def character_endpoint(realm: str, character: str) -> str:
    """Get the character profile endpoint path."""
    return ENDPOINT_CHARACTER.format(realm=realm, character=quote_name(character))


def spell_endpoint(spell_id: int) -> str:
    """Get the spell endpoint path."""
    return ENDPOINT_SPELL.format(spell_id=int(spell_id))


def append_params(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append query parameters to a URL that already has a query string.

    Parameters are added in iteration order as ``&key=value`` with the
    value URL-encoded.

    Args:
        url: URL ending in a query string
        params: Extra query parameters

    Returns:
        URL with the parameters appended
    """
    if params:
        for key, value in params.items():
            url += URL_PARAM.format(key=key, value=quote_plus(str(value)))
    return url
