import re

import pytest

from insights import (
    NO_ANSWER,
    NO_CATEGORY_DATA,
    NO_ENTRIES,
    NO_MOOD_DATA,
    categorize,
    category_counts,
    category_graph_insight,
    chat_insight,
    generate_insight,
    mood_graph_insight,
)
from models import MOODS, Category, MoodDefinition


# =============================================================================
# Mood graph
# =============================================================================

def test_mood_graph_empty():
    assert mood_graph_insight([], MOODS) == NO_MOOD_DATA
    assert mood_graph_insight([], MOODS).startswith("I don't see any mood data yet")


def test_mood_graph_summary(entries_factory):
    entries = entries_factory([5, 5, 3, 1, 2])

    assert mood_graph_insight(entries, MOODS) == (
        "You've most often felt 'Great' (2 times). "
        "Your least frequent mood is 'Good'. "
        "Your average mood is 3.20. "
        "Your best day was 2024-03-01 (Great), "
        "and your toughest day was 2024-03-04 (Struggling). "
        "Keep tracking your feelings, you're doing great!"
    )


def test_mood_graph_ties_go_to_first_mood_definition(entries_factory):
    # Okay and Down both appear twice; Okay comes first in the taxonomy
    entries = entries_factory([2, 3, 2, 3])
    text = mood_graph_insight(entries, MOODS)

    assert "most often felt 'Okay' (2 times)" in text
    assert "least frequent mood is 'Great'" in text


def test_mood_graph_best_and_worst_days_keep_first_occurrence(entries_factory):
    entries = entries_factory([4, 1, 4, 1])
    text = mood_graph_insight(entries, MOODS)

    assert "best day was 2024-03-01 (Good)" in text
    assert "toughest day was 2024-03-02 (Struggling)" in text


def test_missing_moods_count_toward_average(entries_factory):
    entries = entries_factory([4, None])
    assert "Your average mood is 2.00." in mood_graph_insight(entries, MOODS)


def test_mood_graph_skips_moodless_first_entry(entries_factory):
    entries = entries_factory([None, 5, 1])
    text = mood_graph_insight(entries, MOODS)

    assert "best day was 2024-03-02 (Great)" in text
    assert "toughest day was 2024-03-03 (Struggling)" in text


def test_mood_graph_without_any_mood(entries_factory):
    text = mood_graph_insight(entries_factory([None, None]), MOODS)
    assert "best day was 2024-03-01 (no mood recorded)" in text
    assert "toughest day was 2024-03-01 (no mood recorded)" in text


def test_mood_graph_rounds_half_up(entries_factory):
    # 25 / 8 is exactly 3.125
    entries = entries_factory([5, 5, 3, 3, 3, 2, 2, 2])
    assert "Your average mood is 3.13." in mood_graph_insight(entries, MOODS)


def test_mood_graph_never_empty_message_for_data(entries_factory):
    for moods in ([None], [1], [3, None, 5]):
        assert mood_graph_insight(entries_factory(moods), MOODS) != NO_MOOD_DATA


def test_mood_graph_uses_given_taxonomy(entries_factory):
    custom = (MoodDefinition("High", 5), MoodDefinition("Low", 1))
    text = mood_graph_insight(entries_factory([1, 1, 5]), custom)
    assert "most often felt 'Low' (2 times)" in text


# =============================================================================
# Category graph
# =============================================================================

def test_category_graph_empty():
    assert category_graph_insight([]) == NO_CATEGORY_DATA


def test_category_graph_dominant(entries_factory):
    entries = entries_factory([3] * 5, ["stress"] * 4 + [None])

    assert category_graph_insight(entries) == (
        "You've written most about 'stress' (4 entries, 80.0% of your journaling). "
        "This theme is a major focus for you. Consider exploring other areas for a more balanced reflection."
    )


def test_category_graph_balanced(entries_factory):
    categories = ["stress", "gratitude", "growth", "stress", "gratitude", "growth", "other"]
    text = category_graph_insight(entries_factory([3] * 7, categories))

    assert "(2 entries, 28.6% of your journaling)" in text
    assert text.endswith(
        "Your journaling is well-balanced across themes: 'stress' (2), 'gratitude' (2), 'growth' (2)."
    )


def test_category_graph_sixty_percent_is_not_dominant(entries_factory):
    categories = ["growth", "growth", "growth", "stress", "challenge"]
    text = category_graph_insight(entries_factory([3] * 5, categories))

    assert "60.0%" in text
    assert text.endswith("Other frequent themes: 'stress' (1), 'challenge' (1).")


def test_category_graph_reports_shift_between_halves(entries_factory):
    entries = entries_factory([3] * 14, ["stress"] * 7 + ["gratitude"] * 7)
    text = category_graph_insight(entries)

    assert "Other frequent themes: 'gratitude' (7)." in text
    assert "shifted from 'stress' earlier to 'gratitude' more recently" in text


def test_category_graph_no_shift_below_threshold(entries_factory):
    entries = entries_factory([3] * 12, ["stress"] * 6 + ["gratitude"] * 6)
    assert "shifted" not in category_graph_insight(entries)


def test_category_graph_half_split_is_by_position(entries_factory):
    # Dates run backwards; the split still follows list order
    entries = list(reversed(entries_factory([3] * 14, ["gratitude"] * 7 + ["stress"] * 7)))
    assert "shifted from 'stress' earlier to 'gratitude' more recently" in category_graph_insight(entries)


def test_unknown_category_counts_as_other(entries_factory):
    entries = entries_factory([3, 3], ["sports", None])
    assert category_counts(entries) == [("other", 2)]


def test_category_counts_sum_and_top_percent(entries_factory):
    categories = ["stress", "growth", "growth", None, "stress", "growth"]
    entries = entries_factory([3] * 6, categories)
    counts = category_counts(entries)

    assert sum(count for _, count in counts) == len(entries)
    percents = [count / len(entries) * 100 for _, count in counts]
    assert percents[0] == max(percents)


def test_category_graph_percent_rounds_half_up(entries_factory):
    # 5 of 16 is exactly 31.25%
    categories = ["stress"] * 5 + ["growth"] * 4 + ["gratitude"] * 4 + ["hobbies"] * 3
    text = category_graph_insight(entries_factory([3] * 16, categories))
    assert "(5 entries, 31.3% of your journaling)" in text


# =============================================================================
# Chat
# =============================================================================

def test_chat_without_entries():
    assert chat_insight("anything", [], MOODS, []) == NO_ENTRIES


def test_chat_average_mood(entries_factory):
    entries = entries_factory([5, 3, 4])
    assert chat_insight("What's my average mood?", entries, MOODS, []) == "Your average mood is 4.00."


def test_chat_average_matches_mood_graph(entries_factory):
    entries = entries_factory([5, None, 2, 3, 1, 4])
    chat = chat_insight("average mood please", entries, MOODS, [])
    graph = mood_graph_insight(entries, MOODS)

    chat_avg = re.search(r"average mood is (\d+\.\d\d)", chat).group(1)
    graph_avg = re.search(r"average mood is (\d+\.\d\d)", graph).group(1)
    assert chat_avg == graph_avg


def test_chat_fallback_echoes_question(entries_factory):
    entries = entries_factory([3, 4, 5])
    assert chat_insight("banana", entries, MOODS, []) == (
        'You asked: "banana". You have 3 entries. '
        "Try asking about your most common mood, trends, happiest day, or a summary!"
    )


def test_chat_most_common_mood(entries_factory):
    entries = entries_factory([1, 1, 4])
    assert chat_insight("What is my MOST COMMON MOOD", entries, MOODS, []) == (
        "Your most common mood is 'Struggling' (2 times)."
    )


@pytest.mark.parametrize("moods, expected", [
    ([2, 3, 4], "Your mood seems to be improving over time!"),
    ([4, 3, 2], "Your mood seems to be declining over time. Remember, it's okay to have ups and downs."),
    ([3, 5, 3], "Your mood has been steady over time."),
    ([3, 5, None], "Not enough data to detect a trend yet."),
])
def test_chat_trend(entries_factory, moods, expected):
    assert chat_insight("any trend?", entries_factory(moods), MOODS, []) == expected


def test_chat_trend_sorts_by_date(entries_factory):
    # Newest first, as the journal stores them
    entries = list(reversed(entries_factory([1, 3, 5])))
    assert chat_insight("show my pattern", entries, MOODS, []) == "Your mood seems to be improving over time!"


def test_chat_top_themes(entries_factory):
    entries = entries_factory([3] * 4, ["growth", "stress", "growth", None])
    assert chat_insight("What topic do I write about?", entries, MOODS, []) == (
        "Your top journaling themes are: 'growth' (2), 'stress' (1), 'other' (1)."
    )


def test_chat_summary(entries_factory):
    entries = entries_factory([5, 5, 1], ["gratitude", "gratitude", "stress"])
    assert chat_insight("Can you summarize?", entries, MOODS, []) == (
        "Summary: Your most common mood is 'Great'. Your average mood is 3.67. "
        "Your top themes: 'gratitude' (2), 'stress' (1)."
    )


def test_chat_best_and_worst_day(entries_factory):
    entries = entries_factory([3, 5, 2])
    assert chat_insight("happiest day?", entries, MOODS, []) == "Your happiest day was 2024-03-02 (Great)."
    assert chat_insight("my lowest day", entries, MOODS, []) == "Your toughest day was 2024-03-03 (Down)."


def test_chat_best_and_worst_day_skip_moodless_first_entry(entries_factory):
    entries = entries_factory([None, 5, 1])
    assert chat_insight("best day", entries, MOODS, []) == "Your happiest day was 2024-03-02 (Great)."
    assert chat_insight("worst day", entries, MOODS, []) == "Your toughest day was 2024-03-03 (Struggling)."


def test_chat_average_rounds_half_up(entries_factory):
    entries = entries_factory([5, 5, 3, 3, 3, 2, 2, 2])
    assert chat_insight("average mood?", entries, MOODS, []) == "Your average mood is 3.13."


def test_chat_rule_priority(entries_factory):
    entries = entries_factory([3, 4])
    # "trend" is checked before "summary"
    assert chat_insight("summary of my trend", entries, MOODS, []).startswith("Your mood")
    # any question naming a category is answered by the themes rule first
    assert chat_insight("How many entries in category stress?", entries, MOODS, []).startswith(
        "Your top journaling themes are:"
    )


def test_insights_are_idempotent(entries_factory):
    entries = entries_factory([5, 2, 3, 4, 1] * 3, ["stress", "growth", None] * 5)
    snapshot = list(entries)

    for produce in (
        lambda: mood_graph_insight(entries, MOODS),
        lambda: category_graph_insight(entries),
        lambda: chat_insight("summary", entries, MOODS, []),
        lambda: chat_insight("trend", entries, MOODS, []),
    ):
        assert produce() == produce()
    assert entries == snapshot


# =============================================================================
# Categorize / dispatch
# =============================================================================

@pytest.mark.parametrize("text, expected", [
    ("Exams are so stressful", Category.STRESS),
    ("I'm grateful, even though today was hard", Category.STRESS),
    ("Thankful for my dog", Category.GRATITUDE),
    ("Dinner with FAMILY", Category.RELATIONSHIPS),
    ("Finally a victory at chess", Category.ACHIEVEMENT),
    ("Time to relax", Category.SELF_CARE),
    ("A difficult exam", Category.CHALLENGE),
    ("I learned a lot", Category.GROWTH),
    ("The day was fine", Category.OTHER),
    ("", Category.OTHER),
])
def test_categorize(text, expected):
    assert categorize(text) is expected


def test_generate_insight_dispatch(entries_factory):
    entries = entries_factory([4, 4])
    assert generate_insight("mood-graph", entries, MOODS).startswith("You've most often felt 'Good'")
    assert generate_insight("category-graph", entries).startswith("You've written most about 'other'")
    assert generate_insight("chat", entries, MOODS, question="average mood") == "Your average mood is 4.00."
    assert generate_insight("weather", entries) == NO_ANSWER
