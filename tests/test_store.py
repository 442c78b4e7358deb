import uuid

from app.db import MovieStore
from app.models import Movie

SHAWSHANK_ID = "dcdd0fad-a94c-4810-8acc-5f108d3b18c3"
INCEPTION_ID = "5ad1a235-0d9c-410a-b32b-220d91689a08"


def test_all_keeps_seed_order(store):
    titles = [m.title for m in store.all()]
    assert titles[0] == "The Shawshank Redemption"
    assert titles[-1] == "La La Land"
    assert len(titles) == 8


def test_all_filters_genre_case_insensitive(store):
    assert [m.id for m in store.all(genre="sci-fi")] == [INCEPTION_ID]
    assert len(store.all(genre="ACTION")) == 4
    assert store.all(genre="Western") == []


def test_empty_genre_returns_everything(store):
    assert len(store.all(genre="")) == len(store.movies)


def test_get_unknown_returns_none(store):
    assert store.get("nope") is None
    assert store.get(SHAWSHANK_ID).director == "Frank Darabont"


def test_add_generates_uuid_and_appends(store, new_movie):
    movie = store.add({**new_movie, "id": "client-chosen"})
    assert movie.id != "client-chosen"
    assert uuid.UUID(movie.id).version == 4
    assert store.movies[-1] is movie


def test_add_twice_gives_distinct_ids(store, new_movie):
    assert store.add(new_movie).id != store.add(new_movie).id


def test_update_merges_in_place(store):
    position = [m.id for m in store.movies].index(INCEPTION_ID)
    movie = store.update(INCEPTION_ID, {"rate": 9.5, "id": "hijack"})
    assert movie.id == INCEPTION_ID
    assert movie.rate == 9.5
    assert movie.title == "Inception"
    assert store.movies[position] is movie


def test_update_unknown_returns_none(store):
    assert store.update("nope", {"rate": 1}) is None


def test_remove(store):
    assert store.remove(SHAWSHANK_ID) is True
    assert store.get(SHAWSHANK_ID) is None
    assert store.remove(SHAWSHANK_ID) is False


def test_reset_restores_seed(store, new_movie):
    store.add(new_movie)
    store.remove(SHAWSHANK_ID)
    store.reset()
    assert len(store.movies) == 8
    assert store.get(SHAWSHANK_ID) is not None


def test_store_ignores_unknown_seed_keys():
    store = MovieStore([{
        "id": "1", "title": "T", "year": 2000, "director": "D",
        "duration": 90, "poster": "https://x.io/p.jpg", "genre": ["Drama"],
        "budget": 1000,
    }])
    assert store.movies == [Movie(
        id="1", title="T", year=2000, director="D", duration=90,
        poster="https://x.io/p.jpg", genre=["Drama"], rate=0,
    )]
