from flask import Flask, render_template, request, redirect, url_for, jsonify
from pokeview import config
from pokeview.derived import (
    best_sprite,
    format_height,
    format_weight,
    has_distinct_gender_sprites,
    labelize,
    stat_color,
    wiki_name,
)
from pokeview.store import HeldItemsStatus, PokemonStore

app = Flask(__name__)

store = PokemonStore()

WIKI_BASE = "https://bulbapedia.bulbagarden.net/wiki/"

app.jinja_env.filters['labelize'] = labelize
app.jinja_env.filters['wiki_item'] = lambda name: f"{WIKI_BASE}{wiki_name(name)}"
app.jinja_env.filters['wiki_type'] = lambda name: f"{WIKI_BASE}{name}_(type)"


def _after_trigger(ok: bool, what: str):
    if ok:
        return redirect(url_for('index'))
    return redirect(url_for('index', message=f"Could not load {what}, still showing the previous Pokémon"))

@app.route('/toggle_logging')
def toggle_logging():
    config.set_verbose(not config.ENABLE_VERBOSE_LOGGING)
    state = "enabled" if config.ENABLE_VERBOSE_LOGGING else "disabled"
    return redirect(url_for('index', message=f"Verbose logging {state}"))

@app.route('/random')
def random_pokemon():
    return _after_trigger(store.request_random(), "a random Pokémon")

@app.route('/daily')
def pokemon_of_the_day():
    return _after_trigger(store.request_of_the_day(), "the Pokémon of the day")

@app.route('/favorite')
def favorite_pokemon():
    return _after_trigger(store.request_favorite(), "the favorite Pokémon")

@app.route('/pokemon/<name>')
def pokemon_by_name(name):
    key = int(name) if name.isascii() and name.isdigit() else name
    try:
        ok = store.load(key)
    except ValueError:
        return redirect(url_for('index', message=f"'{name}' is not a Pokémon"))
    return _after_trigger(ok, name)

@app.route('/api/snapshot')
def snapshot_json():
    return jsonify(store.snapshot().to_dict())


@app.route('/')
def index():
    """single pokemon view, a pure read of the current snapshot"""
    snap = store.snapshot()
    message = request.args.get("message")
    if snap.is_empty:
        return render_template("pokemon.html", p=None, message=message,
                               logging_enabled=config.ENABLE_VERBOSE_LOGGING)

    poke = snap.record
    kg, lbs = format_weight(poke.weight)
    cm, inches = format_height(poke.height)
    stats = {s.name: s.base_stat for s in poke.stats}

    # assemble payload
    p = {
        "name": poke.name.capitalize(),
        "id": poke.id,
        "generation": snap.generation or "unknown",
        "main_theme": snap.theme.main,
        "sub_theme": snap.theme.sub,
        "types": [t.name for t in poke.types],
        "stats": stats,
        "stat_colors": {k: stat_color(v) for k, v in stats.items()},
        "weight": {"kg": kg, "lbs": lbs},
        "height": {"cm": cm, "inches": inches},
        "sprite": best_sprite(poke.sprites),
        "shiny_sprite": poke.sprites.artwork_shiny or poke.sprites.front_shiny,
        "female_sprite": poke.sprites.front_female if has_distinct_gender_sprites(poke.sprites) else None,
        "held_items": list(snap.held_items),
        "held_items_pending": snap.held_items_status is HeldItemsStatus.PENDING,
    }

    return render_template("pokemon.html", p=p, message=message,
                           logging_enabled=config.ENABLE_VERBOSE_LOGGING)


if __name__ == '__main__':
    app.run(debug=True)
