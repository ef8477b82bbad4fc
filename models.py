"""
Domain records for journal entries and the fixed taxonomies they refer to.

Entries arrive from the browser as loosely-typed JSON. They are parsed here into
immutable records so the insight functions can rely on explicit optional fields.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple


class ValidationError(ValueError):
    """Raised when request data cannot be turned into a valid record."""


class NotFoundError(LookupError):
    """Raised when an item id does not exist."""


class Category(str, Enum):
    STRESS = "stress"
    GRATITUDE = "gratitude"
    RELATIONSHIPS = "relationships"
    ACHIEVEMENT = "achievement"
    SELF_CARE = "self-care"
    CHALLENGE = "challenge"
    GROWTH = "growth"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Any) -> "Category":
        """Map any incoming value onto a category; unknown labels become OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class MoodDefinition:
    label: str
    value: int
    emoji: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "value": self.value, "emoji": self.emoji}


# Ordered as shown in the journal mood picker
MOODS: Tuple[MoodDefinition, ...] = (
    MoodDefinition("Great", 5, "😊"),
    MoodDefinition("Good", 4, "🙂"),
    MoodDefinition("Okay", 3, "😐"),
    MoodDefinition("Down", 2, "😔"),
    MoodDefinition("Struggling", 1, "😢"),
)

MOOD_VALUES = frozenset(m.value for m in MOODS)


@dataclass(frozen=True)
class JournalEntry:
    id: str
    date: str
    content: str
    mood: Optional[int] = None
    ai_category: Optional[Category] = None
    tags: Tuple[str, ...] = ()
    prompt: Optional[str] = None
    stressors: Tuple[str, ...] = ()
    positives: Tuple[str, ...] = ()
    personality: Tuple[str, ...] = ()
    word_count: Optional[int] = None

    def __post_init__(self):
        if self.mood is not None and self.mood not in MOOD_VALUES:
            raise ValidationError(f"Mood must be one of {sorted(MOOD_VALUES)}, got {self.mood!r}")

    @property
    def category(self) -> Category:
        return self.ai_category or Category.OTHER

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "date": self.date,
            "content": self.content,
            "tags": list(self.tags),
            "stressors": list(self.stressors),
            "positives": list(self.positives),
            "personality": list(self.personality),
        }
        if self.mood is not None:
            data["mood"] = self.mood
        if self.ai_category is not None:
            data["aiCategory"] = self.ai_category.value
        if self.prompt:
            data["prompt"] = self.prompt
        if self.word_count is not None:
            data["wordCount"] = self.word_count
        return data


def _string_list(value: Any, name: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValidationError(f"{name} must be a list")
    return tuple(str(v) for v in value if v is not None)


def _parse_mood(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    # bool is an int subclass; true/false are not moods
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Mood must be an integer, got {value!r}")
    return value


def parse_entry(data: Dict[str, Any]) -> JournalEntry:
    """Build a JournalEntry from its camelCase JSON form."""
    if not isinstance(data, dict):
        raise ValidationError("Entry must be an object")

    content = data.get("content", "")
    if not isinstance(content, str):
        raise ValidationError("Content must be a string")

    raw_category = data.get("aiCategory")
    word_count = data.get("wordCount")

    return JournalEntry(
        id=str(data.get("id", "")),
        date=str(data.get("date", "")),
        content=content,
        mood=_parse_mood(data.get("mood")),
        ai_category=Category.parse(raw_category) if raw_category else None,
        tags=_string_list(data.get("tags"), "Tags"),
        prompt=data.get("prompt") or None,
        stressors=_string_list(data.get("stressors"), "Stressors"),
        positives=_string_list(data.get("positives"), "Positives"),
        personality=_string_list(data.get("personality"), "Personality"),
        word_count=word_count if isinstance(word_count, int) else None,
    )


def parse_entries(items: Any) -> List[JournalEntry]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValidationError("Entries must be a list")
    return [parse_entry(item) for item in items]


def parse_moods(items: Optional[Sequence[Dict[str, Any]]]) -> Tuple[MoodDefinition, ...]:
    """Mood definitions sent by a client; falls back to the built-in taxonomy."""
    if not items:
        return MOODS
    if not isinstance(items, list):
        raise ValidationError("Moods must be a list")

    moods = []
    for item in items:
        if not isinstance(item, dict) or "value" not in item:
            raise ValidationError("Each mood needs a label and a value")
        value = item["value"]
        if isinstance(value, bool) or not isinstance(value, int) or value not in MOOD_VALUES:
            raise ValidationError(f"Mood value must be one of {sorted(MOOD_VALUES)}, got {value!r}")
        moods.append(MoodDefinition(
            label=str(item.get("label", "")),
            value=value,
            emoji=str(item.get("emoji", "")),
        ))
    return tuple(moods)

