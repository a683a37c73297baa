import pytest

from pokeview.models import parse_pokemon


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, bad_json=False):
        self.status_code = status_code
        self._json = json_data or {}
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json


class ManualExecutor:
    """Runs submitted work only when the test says so."""

    def __init__(self):
        self.jobs = []

    def submit(self, fn, *args):
        self.jobs.append((fn, args))

    def run(self, index):
        fn, args = self.jobs[index]
        return fn(*args)


def item_url(n):
    return f"https://pokeapi.co/api/v2/item/{n}/"


def pokemon_payload(pid=1, name="bulbasaur", types=("grass", "poison"), held=(), female=None):
    return {
        "id": pid,
        "name": name,
        "types": [{"slot": i + 1, "type": {"name": t, "url": ""}} for i, t in enumerate(types)],
        "stats": [
            {"base_stat": 45, "stat": {"name": "hp"}},
            {"base_stat": 49, "stat": {"name": "attack"}},
            {"base_stat": 45, "stat": {"name": "speed"}},
        ],
        "weight": 69,
        "height": 7,
        "sprites": {
            "front_default": f"https://img/{pid}.png",
            "front_shiny": f"https://img/shiny/{pid}.png",
            "front_female": female,
            "other": {"official-artwork": {"front_default": f"https://art/{pid}.png",
                                           "front_shiny": f"https://art/shiny/{pid}.png"}},
        },
        "held_items": [{"item": {"name": f"item-{n}", "url": item_url(n)}} for n in held],
    }


def make_pokemon(**kw):
    return parse_pokemon(pokemon_payload(**kw))


@pytest.fixture
def manual_executor():
    return ManualExecutor()
