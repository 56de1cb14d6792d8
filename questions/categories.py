"""Question categories with display labels."""

from core.domain.models import QuestionCategory

CATEGORIES = {
    QuestionCategory.DATING: {
        "name_en": "Dating",
        "name_ko": "연애",
        "description": "Crushes, ideal dates, who you'd set up with a friend",
    },
    QuestionCategory.FRIENDSHIP: {
        "name_en": "Friendship",
        "name_ko": "우정",
        "description": "Who you call at 2am, who remembers birthdays",
    },
    QuestionCategory.PERSONALITY: {
        "name_en": "Personality",
        "name_ko": "성격",
        "description": "Kindness, patience, quiet confidence",
    },
    QuestionCategory.ENTERTAINMENT: {
        "name_en": "Entertainment",
        "name_ko": "엔터테인먼트",
        "description": "Karaoke, playlists, binge-watching",
    },
    QuestionCategory.FITNESS: {
        "name_en": "Fitness",
        "name_ko": "운동",
        "description": "Gym regulars, marathon runners, weekend hikers",
    },
    QuestionCategory.APPEARANCE: {
        "name_en": "Appearance",
        "name_ko": "외모",
        "description": "Style, smiles, best-dressed",
    },
    QuestionCategory.WORK: {
        "name_en": "Work",
        "name_ko": "업무",
        "description": "Shipping fast, clean code, calm under deadlines",
    },
    QuestionCategory.HUMOR: {
        "name_en": "Humor",
        "name_ko": "유머",
        "description": "Who makes the room laugh",
    },
    QuestionCategory.OTHER: {
        "name_en": "Other",
        "name_ko": "기타",
        "description": "Everything else",
    },
}


def get_category_display(category: QuestionCategory, lang: str = "en") -> str:
    """Display label for a category, English fallback"""
    entry = CATEGORIES.get(category)
    if not entry:
        return category.value
    return entry.get(f"name_{lang}", entry["name_en"])
