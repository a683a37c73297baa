# pokeview/pokeapi.py
# Catalog lookups: one attempt per call, bounded by config.REQUEST_TIMEOUT

import logging

import requests
from requests.adapters import HTTPAdapter

from pokeview import config
from pokeview.errors import MalformedResponse, NetworkFailure
from pokeview.logger import log_action
from pokeview.models import Pokemon, ResolvedHeldItem, parse_item, parse_pokemon

# --------------------------------------------------------------------------- #
# Shared HTTP session (no retries)
# --------------------------------------------------------------------------- #

_session = requests.Session()
_adapter = HTTPAdapter(max_retries=0)
_session.mount("https://", _adapter)
_session.mount("http://", _adapter)


def _json_fetch(url: str, identifier):
    """GET url and decode JSON, mapping failures onto FetchError subclasses."""
    try:
        r = _session.get(url, timeout=config.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise NetworkFailure(identifier, f"request to {url} failed: {e}") from e
    if r.status_code != 200:
        raise NetworkFailure(identifier, f"{url} returned {r.status_code}", status_code=r.status_code)
    try:
        return r.json()
    except ValueError as e:
        raise MalformedResponse(identifier, f"{url} returned invalid JSON: {e}") from e


def _key(name_or_id) -> str:
    if isinstance(name_or_id, bool):
        raise ValueError("expected a Pokémon id or name")
    if isinstance(name_or_id, int):
        if name_or_id < 1:
            raise ValueError(f"Pokémon id must be positive, got {name_or_id}")
        return str(name_or_id)
    key = str(name_or_id).strip().lower()
    if not key:
        raise ValueError("Pokémon name must not be empty")
    return key


def get_pokemon(name_or_id) -> Pokemon:
    """Fetch and validate one Pokémon record by id or name."""
    key = _key(name_or_id)
    data = _json_fetch(f"{config.POKEAPI_BASE_URL}/pokemon/{key}/", name_or_id)
    try:
        return parse_pokemon(data)
    except (ValueError, TypeError, AttributeError) as e:
        raise MalformedResponse(name_or_id, f"pokemon {key}: {e}") from e


def get_item(url: str) -> ResolvedHeldItem:
    """Fetch a held item's name + sprite from its resource url."""
    data = _json_fetch(url, url)
    try:
        return parse_item(data)
    except (ValueError, TypeError, AttributeError) as e:
        raise MalformedResponse(url, f"item {url}: {e}") from e


def get_species_count() -> int:
    """Total species count the catalog currently reports."""
    data = _json_fetch(f"{config.POKEAPI_BASE_URL}/pokemon-species/?limit=1", "pokemon-species")
    count = data.get("count") if isinstance(data, dict) else None
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        raise MalformedResponse("pokemon-species", f"unexpected species count {count!r}")
    log_action(f"catalog reports {count} species", logging.DEBUG)
    return count
