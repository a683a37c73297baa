import pytest

import app as app_module
from conftest import ManualExecutor, make_pokemon
from pokeview import config
from pokeview.errors import NetworkFailure
from pokeview.models import ResolvedHeldItem
from pokeview.pokeapi import _key
from pokeview.store import PokemonStore


@pytest.fixture
def executor():
    return ManualExecutor()


@pytest.fixture
def client(monkeypatch, executor):
    records = {
        config.FAVORITE_POKEMON_ID: make_pokemon(pid=config.FAVORITE_POKEMON_ID, name="pikachu",
                                                 types=("electric",), held=(1,), female="https://img/f.png"),
        "charizard": make_pokemon(pid=6, name="charizard", types=("fire", "flying")),
    }

    def fetch(name_or_id):
        _key(name_or_id)  # same input checks as the real fetcher
        if name_or_id not in records:
            raise NetworkFailure(name_or_id, "offline")
        return records[name_or_id]

    store = PokemonStore(
        fetch_pokemon=fetch,
        resolve_items=lambda refs: [ResolvedHeldItem("light-ball", "https://img/light-ball.png")],
        executor=executor,
        species_count=lambda: 1025,
    )
    monkeypatch.setattr(app_module, "store", store)
    monkeypatch.setattr(config, "ENABLE_VERBOSE_LOGGING", False)
    app_module.app.config["TESTING"] = True
    return app_module.app.test_client()


def test_empty_page(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Pok\xc3\xa9mon of the day" in res.data
    assert b"pokemon-name" not in res.data


def test_favorite_then_held_items(client, executor):
    res = client.get("/favorite")
    assert res.status_code == 302

    page = client.get("/").data.decode()
    assert "Pikachu" in page
    assert "theme-electric subtheme-electric" in page
    assert 'http-equiv="refresh"' in page
    assert "Generation I (Kanto)" in page
    assert "Weight: 6.9 kg (15.2 lbs)" in page
    assert "Height: 70 cm (28 inches)" in page
    assert "https://img/f.png" in page

    executor.run(0)
    page = client.get("/").data.decode()
    assert "light-ball" in page
    assert "light_Ball" in page
    assert 'http-equiv="refresh"' not in page


def test_failed_trigger_keeps_page_and_reports(client):
    client.get("/pokemon/charizard")
    res = client.get("/pokemon/mewthree")
    assert res.status_code == 302
    assert "message=" in res.headers["Location"]

    page = client.get(res.headers["Location"]).data.decode()
    assert "Charizard" in page
    assert "still showing the previous" in page


def test_pokemon_zero_rejected(client):
    res = client.get("/pokemon/0")
    assert "message=" in res.headers["Location"]
    assert app_module.store.snapshot().is_empty


def test_snapshot_json(client, executor):
    assert client.get("/api/snapshot").get_json()["record"] is None
    client.get("/favorite")
    data = client.get("/api/snapshot").get_json()
    assert data["record"]["name"] == "pikachu"
    assert data["held_items_status"] == "pending"
    executor.run(0)
    data = client.get("/api/snapshot").get_json()
    assert data["held_items"] == [{"name": "light-ball", "sprite": "https://img/light-ball.png"}]


def test_toggle_logging(client):
    client.get("/toggle_logging")
    assert config.ENABLE_VERBOSE_LOGGING is True
    client.get("/toggle_logging")
    assert config.ENABLE_VERBOSE_LOGGING is False


@pytest.mark.parametrize("path", ["/pokemon/%20", "/pokemon/%C2%B2"])
def test_bad_name_redirects_with_message(client, path):
    client.get("/pokemon/charizard")
    res = client.get(path)
    assert res.status_code == 302
    assert "message=" in res.headers["Location"]
    assert app_module.store.snapshot().record.name == "charizard"
