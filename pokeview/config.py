# pokeview/config.py
# Settings for the catalog client, store and logging

import os

# --------------------------------------------------------------------------- #
# Catalog API
# --------------------------------------------------------------------------- #

POKEAPI_BASE_URL = os.environ.get("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")

# seconds; applied to every fetch
REQUEST_TIMEOUT = float(os.environ.get("POKEAPI_TIMEOUT", "10"))

# used for random ids when the species count can't be fetched
DEFAULT_SPECIES_COUNT = 1025

FAVORITE_POKEMON_ID = 25  # pikachu

# background pool that runs held-item resolution
HELD_ITEM_WORKERS = 4

# --------------------------------------------------------------------------- #
# Logging
# --------------------------------------------------------------------------- #

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("LOG_FILE") or None

ENABLE_VERBOSE_LOGGING = False

def set_verbose(on: bool):
    """Enable/disable verbose store logs."""
    global ENABLE_VERBOSE_LOGGING
    ENABLE_VERBOSE_LOGGING = bool(on)
