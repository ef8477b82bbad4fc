"""
Hope gallery: photos and "why I stay" stories shared by the user.

Items are plain dicts in the stored camelCase shape. The helpers return new
items instead of editing the ones passed in.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import config
from models import NotFoundError, ValidationError

GALLERY_CATEGORIES = ("family", "friends", "pets", "nature", "art", "other")
REACTIONS = ("likes", "hearts", "stars")
SORT_OPTIONS = ("newest", "oldest", "mostLiked", "mostReacted")
KINDS = ("photos", "stories")

# Shown by the gallery companion when the user asks for inspiration
STORY_PROMPTS = (
    "What gives you hope on tough days?",
    "Describe a memory with someone you love.",
    "What is one thing you're grateful for today?",
    "Share a message you wish someone would tell you.",
    "Who or what inspires you to keep going?",
)


def _category(value: Any) -> str:
    value = str(value or "other").lower()
    return value if value in GALLERY_CATEGORIES else "other"


def _tags(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(t).strip()[:config.MAX_TAG_LENGTH] for t in value if str(t).strip()][:config.MAX_TAGS]


def _base_item(item_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": item_id,
        "category": _category(body.get("category")),
        "tags": _tags(body.get("tags")),
        "reactions": {kind: 0 for kind in REACTIONS},
        "isPrivate": bool(body.get("isPrivate", False)),
        "reported": False,
        "comments": [],
    }


def new_photo(item_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    url = body.get("url")
    if not isinstance(url, str) or not url:
        raise ValidationError("Photo url is required")

    photo = _base_item(item_id, body)
    photo.update({
        "url": url,
        "name": str(body.get("name") or "photo"),
        "description": str(body.get("description") or ""),
        "createdAt": datetime.now().isoformat(),
    })
    return photo


def new_story(item_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
    text = body.get("text")
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Story text is required")

    story = _base_item(item_id, body)
    story.update({
        "text": text.strip(),
        "date": datetime.now().isoformat(),
    })
    if body.get("photo"):
        story["photo"] = str(body["photo"])
    return story


def _replace(items: List[Dict[str, Any]], item_id: str, change) -> List[Dict[str, Any]]:
    updated = []
    found = False
    for item in items:
        if item.get("id") == item_id:
            item = change(dict(item))
            found = True
        updated.append(item)
    if not found:
        raise NotFoundError(f"No item with id {item_id}")
    return updated


def react(items: List[Dict[str, Any]], item_id: str, reaction: str) -> List[Dict[str, Any]]:
    if reaction not in REACTIONS:
        raise ValidationError(f"Reaction must be one of {', '.join(REACTIONS)}")

    def change(item):
        reactions = {kind: 0 for kind in REACTIONS}
        reactions.update(_reaction_counts(item))
        reactions[reaction] += 1
        item["reactions"] = reactions
        return item

    return _replace(items, item_id, change)


def add_comment(
    items: List[Dict[str, Any]],
    item_id: str,
    comment_id: str,
    text: Any,
    author: Optional[str] = None,
) -> List[Dict[str, Any]]:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Comment text is required")

    comment = {
        "id": comment_id,
        "text": text.strip()[:config.MAX_COMMENT_LENGTH],
        "author": author or "Anonymous",
        "date": datetime.now().isoformat(),
    }

    def change(item):
        item["comments"] = list(item.get("comments") or []) + [comment]
        return item

    return _replace(items, item_id, change)


def report(items: List[Dict[str, Any]], item_id: str) -> List[Dict[str, Any]]:
    def change(item):
        item["reported"] = True
        return item

    return _replace(items, item_id, change)


def toggle_privacy(items: List[Dict[str, Any]], item_id: str) -> List[Dict[str, Any]]:
    def change(item):
        item["isPrivate"] = not item.get("isPrivate", False)
        return item

    return _replace(items, item_id, change)


def find(items: List[Dict[str, Any]], item_id: str) -> Dict[str, Any]:
    for item in items:
        if item.get("id") == item_id:
            return item
    raise NotFoundError(f"No item with id {item_id}")


def _timestamp(item: Dict[str, Any]) -> str:
    return item.get("createdAt") or item.get("date") or ""


def _reaction_counts(item: Dict[str, Any]) -> Dict[str, int]:
    """Stored reaction counts; values that are not whole numbers are dropped."""
    reactions = item.get("reactions")
    if not isinstance(reactions, dict):
        return {}
    counts = {}
    for kind, value in reactions.items():
        if isinstance(value, bool):
            continue
        try:
            counts[kind] = int(value)
        except (TypeError, ValueError, OverflowError):
            continue
    return counts


def _total_reactions(item: Dict[str, Any]) -> int:
    return sum(_reaction_counts(item).values())


def visible(
    items: List[Dict[str, Any]],
    category: str = "all",
    query: str = "",
    sort: str = "newest",
) -> List[Dict[str, Any]]:
    """Items to show in the gallery: unreported, filtered, then sorted."""
    if sort not in SORT_OPTIONS:
        raise ValidationError(f"Sort must be one of {', '.join(SORT_OPTIONS)}")

    query = (query or "").strip().lower()
    shown = []
    for item in items:
        if item.get("reported"):
            continue
        if category and category != "all" and item.get("category") != category:
            continue
        if query:
            text = (item.get("text") or item.get("description") or "").lower()
            tags = [t.lower() for t in item.get("tags") or []]
            if query not in text and not any(query in t for t in tags):
                continue
        shown.append(item)

    if sort == "newest":
        return sorted(shown, key=_timestamp, reverse=True)
    if sort == "oldest":
        return sorted(shown, key=_timestamp)
    if sort == "mostLiked":
        return sorted(shown, key=lambda i: _reaction_counts(i).get("likes", 0), reverse=True)
    return sorted(shown, key=_total_reactions, reverse=True)
