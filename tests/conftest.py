import pytest
from fastapi.testclient import TestClient

from app.db import DEFAULT_SEED_PATH, MovieStore, get_store
from app.main import app


@pytest.fixture
def store():
    # every test gets its own freshly seeded list
    return MovieStore.load(DEFAULT_SEED_PATH)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def new_movie():
    return {
        "title": "Spirited Away",
        "year": 2001,
        "director": "Hayao Miyazaki",
        "duration": 125,
        "poster": "https://movies.com/posters/spirited-away.jpg",
        "genre": ["Adventure", "Fantasy"],
        "rate": 8.6,
    }
