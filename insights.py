"""
Rule-based journal insights.

Every function here is pure: it reads a snapshot of entries and returns a
sentence for the chat or graph panels. Nothing raises on thin data; an empty
or incomplete journal gets an encouraging canned message instead.
"""

import re
from decimal import ROUND_HALF_UP, Decimal
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from models import MOODS, Category, JournalEntry, MoodDefinition


NO_MOOD_DATA = "I don't see any mood data yet, but I'm here whenever you want to share!"
NO_CATEGORY_DATA = "No category data to analyze yet, but I'm here to help you reflect whenever you're ready!"
NO_ENTRIES = "You don't have any journal entries yet. Start writing to see insights!"
NO_ANSWER = "Sorry, I could not find an answer."

# Minimum journal size before comparing the first and second half for a shift
SHIFT_MIN_ENTRIES = 14

# Scanned in order; the first category with a matching keyword wins
CATEGORY_KEYWORDS: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (Category.STRESS, ("stress", "cry", "hard")),
    (Category.GRATITUDE, ("grateful", "gratitude", "thank")),
    (Category.RELATIONSHIPS, ("friend", "family", "relationship")),
    (Category.ACHIEVEMENT, ("achieve", "win", "victory")),
    (Category.SELF_CARE, ("self-care", "rest", "relax")),
    (Category.CHALLENGE, ("challenge", "difficult")),
    (Category.GROWTH, ("grow", "learn")),
)

# (keywords, handler name) in dispatch priority order
CHAT_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("most common mood", "frequent mood"), "most_common_mood"),
    (("trend", "pattern"), "trend"),
    (("category", "topic", "theme"), "top_themes"),
    (("summary", "summarize", "suggest"), "summary"),
    (("happiest day", "best day"), "best_day"),
    (("worst day", "saddest day", "lowest day"), "worst_day"),
    (("average mood",), "average_mood"),
)

CATEGORY_COUNT_PATTERN = re.compile(r"category ([a-z]+)")


def categorize(text: str) -> Category:
    """Assign a journal category from keywords in the entry text."""
    lowered = (text or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.OTHER


# =============================================================================
# Aggregates
# =============================================================================

def mood_counts(entries: Sequence[JournalEntry], moods: Sequence[MoodDefinition]) -> List[Tuple[MoodDefinition, int]]:
    return [(mood, sum(1 for e in entries if e.mood == mood.value)) for mood in moods]


def most_common_mood(counts: Sequence[Tuple[MoodDefinition, int]]) -> Tuple[MoodDefinition, int]:
    best = counts[0]
    for item in counts[1:]:
        if item[1] > best[1]:
            best = item
    return best


def least_common_mood(counts: Sequence[Tuple[MoodDefinition, int]]) -> Tuple[MoodDefinition, int]:
    least = counts[0]
    for item in counts[1:]:
        if item[1] < least[1]:
            least = item
    return least


def round_half_up(value: float, places: int) -> str:
    """Fixed-point text with exact halves rounded up (3.125 -> "3.13")."""
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def average_mood(entries: Sequence[JournalEntry]) -> str:
    """Mean mood to two decimals. Entries without a mood count as zero."""
    total = sum(e.mood or 0 for e in entries)
    return round_half_up(total / len(entries), 2)


def _extreme_day(entries: Sequence[JournalEntry], wins) -> JournalEntry:
    # Moodless entries are skipped; with no mood anywhere the first entry stands
    rated = [e for e in entries if e.mood is not None]
    if not rated:
        return entries[0]
    chosen = rated[0]
    for entry in rated[1:]:
        if wins(entry.mood, chosen.mood):
            chosen = entry
    return chosen


def best_day(entries: Sequence[JournalEntry]) -> JournalEntry:
    return _extreme_day(entries, lambda a, b: a > b)


def worst_day(entries: Sequence[JournalEntry]) -> JournalEntry:
    return _extreme_day(entries, lambda a, b: a < b)


def mood_label(value: Optional[int], moods: Sequence[MoodDefinition]) -> str:
    for mood in moods:
        if mood.value == value:
            return mood.label
    return "no mood recorded"


def category_counts(entries: Sequence[JournalEntry]) -> List[Tuple[str, int]]:
    """Entry count per category, largest first; ties keep first-seen order."""
    counts: Dict[str, int] = {}
    for entry in entries:
        key = entry.category.value
        counts[key] = counts.get(key, 0) + 1
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def top_category(entries: Sequence[JournalEntry]) -> Optional[str]:
    counts = category_counts(entries)
    return counts[0][0] if counts else None


def _format_categories(items: Sequence[Tuple[str, int]]) -> str:
    return ", ".join(f"'{cat}' ({count})" for cat, count in items)


def _date_key(entry: JournalEntry) -> Tuple[int, datetime]:
    # Unparseable dates sort after every real one
    try:
        parsed = datetime.fromisoformat(entry.date)
    except ValueError:
        return 1, datetime.max
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return 0, parsed


# =============================================================================
# Graph Insights
# =============================================================================

def mood_graph_insight(entries: Sequence[JournalEntry], moods: Sequence[MoodDefinition] = MOODS) -> str:
    """Summarize mood frequencies, the average, and the best and worst days."""
    if not entries:
        return NO_MOOD_DATA

    counts = mood_counts(entries, moods)
    common, common_count = most_common_mood(counts)
    least, _ = least_common_mood(counts)
    best = best_day(entries)
    worst = worst_day(entries)

    return (
        f"You've most often felt '{common.label}' ({common_count} times). "
        f"Your least frequent mood is '{least.label}'. "
        f"Your average mood is {average_mood(entries)}. "
        f"Your best day was {best.date} ({mood_label(best.mood, moods)}), "
        f"and your toughest day was {worst.date} ({mood_label(worst.mood, moods)}). "
        "Keep tracking your feelings, you're doing great!"
    )


def category_graph_insight(entries: Sequence[JournalEntry]) -> str:
    """
    Describe how journaling is spread across categories.

    For journals of SHIFT_MIN_ENTRIES or more, the list is cut in half by
    position (not by date) and a change of top category between the halves
    is reported.
    """
    if not entries:
        return NO_CATEGORY_DATA

    ranked = category_counts(entries)
    top3 = ranked[:3]
    top_cat, top_count = ranked[0]
    top_percent = round_half_up(top_count / len(entries) * 100, 1)

    message = f"You've written most about '{top_cat}' ({top_count} entries, {top_percent}% of your journaling)."

    if float(top_percent) > 60:
        message += " This theme is a major focus for you. Consider exploring other areas for a more balanced reflection."
    elif float(top_percent) < 35 and len(top3) > 1:
        message += f" Your journaling is well-balanced across themes: {_format_categories(top3)}."
    elif len(top3) > 1:
        message += f" Other frequent themes: {_format_categories(top3[1:])}."

    if len(entries) >= SHIFT_MIN_ENTRIES:
        middle = len(entries) // 2
        first_top = top_category(entries[:middle])
        last_top = top_category(entries[middle:])
        if first_top and last_top and first_top != last_top:
            message += f" Notably, your focus has shifted from '{first_top}' earlier to '{last_top}' more recently."

    return message


# =============================================================================
# Chat Insights
# =============================================================================

def _answer_most_common_mood(entries, moods):
    mood, count = most_common_mood(mood_counts(entries, moods))
    return f"Your most common mood is '{mood.label}' ({count} times)."


def _answer_trend(entries, moods):
    ordered = sorted(entries, key=_date_key)
    first, last = ordered[0].mood, ordered[-1].mood
    if first is None or last is None:
        return "Not enough data to detect a trend yet."
    if last > first:
        return "Your mood seems to be improving over time!"
    if last < first:
        return "Your mood seems to be declining over time. Remember, it's okay to have ups and downs."
    return "Your mood has been steady over time."


def _answer_top_themes(entries, moods):
    return f"Your top journaling themes are: {_format_categories(category_counts(entries)[:3])}."


def _answer_summary(entries, moods):
    mood, _ = most_common_mood(mood_counts(entries, moods))
    return (
        f"Summary: Your most common mood is '{mood.label}'. "
        f"Your average mood is {average_mood(entries)}. "
        f"Your top themes: {_format_categories(category_counts(entries)[:3])}."
    )


def _answer_best_day(entries, moods):
    best = best_day(entries)
    return f"Your happiest day was {best.date} ({mood_label(best.mood, moods)})."


def _answer_worst_day(entries, moods):
    worst = worst_day(entries)
    return f"Your toughest day was {worst.date} ({mood_label(worst.mood, moods)})."


def _answer_average_mood(entries, moods):
    return f"Your average mood is {average_mood(entries)}."


_ANSWERS = {
    "most_common_mood": _answer_most_common_mood,
    "trend": _answer_trend,
    "top_themes": _answer_top_themes,
    "summary": _answer_summary,
    "best_day": _answer_best_day,
    "worst_day": _answer_worst_day,
    "average_mood": _answer_average_mood,
}


def chat_insight(
    question: str,
    entries: Sequence[JournalEntry],
    moods: Sequence[MoodDefinition] = MOODS,
    tags: Sequence[str] = (),
) -> str:
    """
    Answer a free-text question about the journal by keyword matching.

    Rules are tried in CHAT_RULES order and the first match answers. Tags are
    accepted for interface parity with the graph panels but not consulted.
    """
    if not entries:
        return NO_ENTRIES

    q = (question or "").lower()
    for keywords, name in CHAT_RULES:
        if any(keyword in q for keyword in keywords):
            return _ANSWERS[name](entries, moods)

    # Unreachable while "category" also triggers the themes rule above
    if "how many" in q and "category" in q:
        match = CATEGORY_COUNT_PATTERN.search(q)
        if match:
            cat = match.group(1)
            count = sum(1 for e in entries if e.category.value.lower() == cat)
            return f"You have {count} entries in the '{cat}' category."

    return (
        f'You asked: "{question}". You have {len(entries)} entries. '
        "Try asking about your most common mood, trends, happiest day, or a summary!"
    )


def generate_insight(
    insight_type: str,
    entries: Sequence[JournalEntry],
    moods: Sequence[MoodDefinition] = MOODS,
    tags: Sequence[str] = (),
    question: Optional[str] = None,
) -> str:
    """Route an insight request to the panel that produces it."""
    if insight_type == "mood-graph":
        return mood_graph_insight(entries, moods)
    if insight_type == "category-graph":
        return category_graph_insight(entries)
    if insight_type == "chat":
        return chat_insight(question or "", entries, moods, tags)
    return NO_ANSWER
