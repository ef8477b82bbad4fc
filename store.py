"""
File-backed storage for journal entries and the hope gallery.

Everything lives in one JSON document:
    {"entries": [...], "photos": [...], "stories": [...], "metadata": {...}}
Entries and stories are kept newest first.
"""

import json
import logging
import os
import random
import time
from datetime import date, datetime
from typing import Any, Dict, List

import config
from insights import categorize
from models import JournalEntry, ValidationError, parse_entries, parse_entry

logger = logging.getLogger(__name__)

COLLECTIONS = ("entries", "photos", "stories")

JOURNAL_PROMPTS = (
    "What's one thing that made you smile today?",
    "What's a challenge you're facing, and how are you handling it?",
    "What are three things you're grateful for right now?",
    "What's something you're looking forward to?",
    "What's a small victory you had today?",
    "What's something you'd like to improve about your day?",
    "What's a kind thing someone did for you recently?",
    "What's something you're proud of yourself for?",
    "What's a lesson you learned recently?",
    "What's a goal you're working towards?",
    "What's something that inspired you today?",
    "What's a way you showed kindness today?",
)


def empty_document() -> Dict[str, Any]:
    return {"entries": [], "photos": [], "stories": [], "metadata": {}}


# =============================================================================
# Data Layer
# =============================================================================

def load_data() -> Dict[str, Any]:
    """Load the data document, falling back to an empty one on any problem."""
    path = config.DATA_FILE
    if not os.path.exists(path):
        data = empty_document()
        data["metadata"]["created_at"] = datetime.now().isoformat()
        return data

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid data format, resetting")
            return empty_document()

        for key in COLLECTIONS:
            if not isinstance(data.get(key), list):
                data[key] = []
        if not isinstance(data.get("metadata"), dict):
            data["metadata"] = {}

        return data

    except json.JSONDecodeError as e:
        logger.error(f"JSON decode error: {e}")
        return empty_document()
    except OSError as e:
        logger.error(f"File read error: {e}")
        return empty_document()


def save_data(data: Dict[str, Any]) -> bool:
    """Save the data document atomically, keeping the previous copy as .bak."""
    path = config.DATA_FILE
    tmp_file = f"{path}.tmp"
    backup_file = f"{path}.bak"

    try:
        with open(tmp_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        if os.path.exists(path):
            try:
                os.replace(path, backup_file)
            except OSError as e:
                logger.warning(f"Could not write backup: {e}")

        os.replace(tmp_file, path)
        return True

    except OSError as e:
        logger.error(f"Save error: {e}")
        if os.path.exists(tmp_file):
            try:
                os.remove(tmp_file)
            except OSError:
                logger.warning(f"Could not remove {tmp_file}")
        return False


def next_id(existing: List[Dict[str, Any]]) -> str:
    """Millisecond timestamp id, bumped past the newest existing id."""
    candidate = int(time.time() * 1000)
    for item in existing:
        try:
            candidate = max(candidate, int(item.get("id", 0)) + 1)
        except (TypeError, ValueError):
            continue
    return str(candidate)


# =============================================================================
# Journal Entries
# =============================================================================

def _clean_tags(tags: Any) -> List[str]:
    if not isinstance(tags, list):
        return []
    return [str(t).strip()[:config.MAX_TAG_LENGTH] for t in tags if t][:config.MAX_TAGS]


def list_entries() -> List[JournalEntry]:
    return parse_entries(load_data()["entries"])


def next_prompt() -> str:
    """A writing prompt no saved entry has answered yet; any prompt once all are used."""
    used = {e.get("prompt") for e in load_data()["entries"] if isinstance(e, dict)}
    unused = [p for p in JOURNAL_PROMPTS if p not in used]
    return random.choice(unused or JOURNAL_PROMPTS)


def add_entry(body: Dict[str, Any]) -> JournalEntry:
    """Create a journal entry from a client submission and persist it."""
    if not isinstance(body, dict):
        raise ValidationError("Invalid data format")

    content = body.get("content", "")
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Please write something in your journal entry.")
    content = content.strip()
    if len(content) > config.MAX_ENTRY_LENGTH:
        raise ValidationError(f"Content exceeds maximum length of {config.MAX_ENTRY_LENGTH} characters")

    data = load_data()
    payload = dict(body)
    payload.update({
        "id": next_id(data["entries"]),
        "date": body.get("date") or date.today().isoformat(),
        "content": content,
        "tags": _clean_tags(body.get("tags")),
        "aiCategory": body.get("aiCategory") or categorize(content).value,
        "wordCount": len(content.split()),
    })
    entry = parse_entry(payload)

    data["entries"].insert(0, entry.to_dict())
    if not save_data(data):
        raise OSError("Failed to save entry")

    logger.info(f"Saved entry {entry.id} ({entry.category.value})")
    return entry


def export_entries() -> Dict[str, Any]:
    data = load_data()
    return {
        "entries": data["entries"],
        "exported_at": datetime.now().isoformat(),
        "version": "1.0",
    }


def import_entries(items: Any, replace: bool = False) -> int:
    """
    Import a backup of entries.

    Imported entries go in front of the existing ones; with replace=True the
    existing entries are discarded. Returns the resulting entry count.
    """
    imported = [entry.to_dict() for entry in parse_entries(items)]
    data = load_data()
    data["entries"] = imported if replace else imported + data["entries"]
    data["metadata"]["imported_at"] = datetime.now().isoformat()

    if not save_data(data):
        raise OSError("Failed to save imported data")
    logger.info(f"Imported {len(imported)} entries (replace={replace})")
    return len(data["entries"])


def clear_data() -> bool:
    data = empty_document()
    data["metadata"]["cleared_at"] = datetime.now().isoformat()
    return save_data(data)


# =============================================================================
# Hope Gallery
# =============================================================================

def load_gallery(kind: str) -> List[Dict[str, Any]]:
    return load_data()[kind]


def save_gallery(kind: str, items: List[Dict[str, Any]]) -> None:
    data = load_data()
    data[kind] = items
    if not save_data(data):
        raise OSError(f"Failed to save {kind}")
