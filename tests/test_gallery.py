import pytest

import gallery
from models import NotFoundError, ValidationError


@pytest.fixture
def items():
    first = gallery.new_story("1", {"text": "My dog waits for me", "category": "pets", "tags": ["Dog"]})
    first["date"] = "2024-01-01T10:00:00"
    second = gallery.new_story("2", {"text": "My sister", "category": "family"})
    second["date"] = "2024-02-01T10:00:00"
    return [first, second]


def test_new_story_defaults():
    story = gallery.new_story("7", {"text": "  hope  ", "category": "space", "isPrivate": True})

    assert story["text"] == "hope"
    assert story["category"] == "other"
    assert story["reactions"] == {"likes": 0, "hearts": 0, "stars": 0}
    assert story["isPrivate"] is True
    assert story["comments"] == []
    assert "photo" not in story


def test_new_story_and_photo_require_content():
    with pytest.raises(ValidationError):
        gallery.new_story("1", {"text": "   "})
    with pytest.raises(ValidationError):
        gallery.new_photo("1", {"name": "x.png"})


def test_new_photo():
    photo = gallery.new_photo("3", {"url": "data:image/png;base64,AAA", "name": "sunset.png", "category": "nature"})
    assert photo["name"] == "sunset.png"
    assert photo["category"] == "nature"
    assert "createdAt" in photo


def test_react_returns_new_list(items):
    updated = gallery.react(items, "1", "hearts")

    assert updated[0]["reactions"]["hearts"] == 1
    assert items[0]["reactions"]["hearts"] == 0
    with pytest.raises(ValidationError):
        gallery.react(items, "1", "claps")
    with pytest.raises(NotFoundError):
        gallery.react(items, "404", "likes")


def test_comment(items):
    updated = gallery.add_comment(items, "2", "c1", " You are loved ")
    comment = updated[1]["comments"][0]

    assert comment["text"] == "You are loved"
    assert comment["author"] == "Anonymous"
    with pytest.raises(ValidationError):
        gallery.add_comment(items, "2", "c2", "")


def test_report_hides_item(items):
    updated = gallery.report(items, "1")
    assert [i["id"] for i in gallery.visible(updated)] == ["2"]


def test_toggle_privacy(items):
    once = gallery.toggle_privacy(items, "1")
    twice = gallery.toggle_privacy(once, "1")
    assert once[0]["isPrivate"] is True
    assert twice[0]["isPrivate"] is False


def test_visible_filters_and_sorts(items):
    assert [i["id"] for i in gallery.visible(items)] == ["2", "1"]
    assert [i["id"] for i in gallery.visible(items, sort="oldest")] == ["1", "2"]
    assert [i["id"] for i in gallery.visible(items, category="pets")] == ["1"]
    assert [i["id"] for i in gallery.visible(items, query="dog")] == ["1"]
    assert [i["id"] for i in gallery.visible(items, query="SISTER")] == ["2"]

    liked = gallery.react(gallery.react(items, "1", "likes"), "2", "stars")
    liked = gallery.react(liked, "2", "hearts")
    assert [i["id"] for i in gallery.visible(liked, sort="mostLiked")] == ["1", "2"]
    assert [i["id"] for i in gallery.visible(liked, sort="mostReacted")] == ["2", "1"]

    with pytest.raises(ValidationError):
        gallery.visible(items, sort="random")


def test_visible_sorts_past_malformed_reactions(items):
    items[0]["reactions"] = {"likes": "x", "hearts": 2, "stars": None}
    items[1]["reactions"] = {"likes": "3", "hearts": 0}

    assert [i["id"] for i in gallery.visible(items, sort="mostReacted")] == ["2", "1"]
    assert [i["id"] for i in gallery.visible(items, sort="mostLiked")] == ["2", "1"]

    updated = gallery.react(items, "1", "likes")
    assert updated[0]["reactions"]["likes"] == 1
    assert updated[0]["reactions"]["hearts"] == 2
