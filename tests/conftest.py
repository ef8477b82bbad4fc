import pytest

import config
from models import parse_entry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DATA_FILE", str(tmp_path / "stay_data.json"))
    monkeypatch.setattr(config, "GROQ_API_KEY", None)
    monkeypatch.setattr(config, "INSIGHTS_USE_AI", False)
    return tmp_path


@pytest.fixture
def client():
    from app import app
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def make_entries(moods, categories=None, start_day=1):
    """Entries dated one day apart, in the order given."""
    categories = categories or [None] * len(moods)
    entries = []
    for i, (mood, category) in enumerate(zip(moods, categories)):
        data = {
            "id": str(1000 + i),
            "date": f"2024-03-{start_day + i:02d}",
            "content": f"entry {i}",
        }
        if mood is not None:
            data["mood"] = mood
        if category is not None:
            data["aiCategory"] = category
        entries.append(parse_entry(data))
    return entries


@pytest.fixture
def entries_factory():
    return make_entries
