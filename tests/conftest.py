"""Pytest configuration and fixtures."""

import pytest

from creator_context.auth import AccessGate, Session, SessionUser
from creator_context.context import CreatorContextBuilder, ProfileContextCache
from creator_context.storage import InMemoryProfileStore

TTL_MS = 300_000


@pytest.fixture(autouse=True)
def _no_real_config(monkeypatch, tmp_path):
    """Keep tests away from ~/.creator-context/config and the shell environment."""
    monkeypatch.setattr("creator_context.config.toml_source.TOML_PATH", tmp_path / "settings.toml")
    for var in (
        "CREATOR_PROFILE_CACHE_TTL",
        "SUPABASE_URL",
        "NEXT_PUBLIC_SUPABASE_URL",
        "SUPABASE_SERVICE_ROLE_KEY",
        "SUPABASE_KEY",
        "LOG_LEVEL",
        "DEBUG",
        "DEVELOPMENT_MODE",
        "CREATORS_TABLE",
        "INSTAGRAM_PROFILES_TABLE",
    ):
        monkeypatch.delenv(var, raising=False)


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class StubSessionAccessor:
    """Session accessor returning a fixed session and counting calls."""

    def __init__(self, user_id: str | None = "test-user-id") -> None:
        self.session: Session | None = Session(user=SessionUser(id=user_id)) if user_id else None
        self.calls = 0

    async def __call__(self) -> Session | None:
        self.calls += 1
        return self.session


@pytest.fixture
def sample_user_id():
    return "test-user-id"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_accessor(sample_user_id):
    return StubSessionAccessor(sample_user_id)


@pytest.fixture
def store():
    return InMemoryProfileStore()


@pytest.fixture
def cache(clock):
    return ProfileContextCache(ttl_ms=TTL_MS, clock=clock)


@pytest.fixture
def builder(session_accessor, store, cache):
    return CreatorContextBuilder(AccessGate(session_accessor, store), store, cache)


@pytest.fixture
def complete_creator_row(sample_user_id):
    """Fully populated creators row."""
    return {
        "id": "creator-id",
        "user_id": sample_user_id,
        "full_name": "John Doe",
        "age": 25,
        "location": "United States",
        "primary_language": "English",
        "platforms": ["YouTube", "Instagram"],
        "main_focus_platform": "YouTube",
        "other_platforms": None,
        "primary_niche": "Technology",
        "sub_niche": "Web Development",
        "target_audience": ["Millennials", "Working Professionals"],
        "other_niche": None,
        "other_target_audience": None,
        "brand_words": "Educational, Professional, Helpful",
        "tone_style": "Professional",
        "total_followers": 10000,
        "average_views": 5000,
        "content_formats": ["Long-form video", "Short-form video"],
        "typical_length_number": 15,
        "typical_length_unit": "minutes",
        "other_formats": None,
        "on_camera": "Yes",
        "use_voiceovers": "No",
        "editing_music_style": "Clean, professional editing",
        "short_term_goals": "Reach 15k subscribers in 3 months",
        "long_term_goals": "Build sustainable income from content",
        "posting_frequency": 3,
        "posting_schedule": "Weekly",
        "biggest_challenge": "Consistency in posting",
        "strengths": "Good at explaining complex topics",
        "weaknesses": "Sometimes struggle with video editing",
        "income_streams": ["Sponsorships", "Affiliate marketing"],
        "brand_types_to_avoid": "Gambling, alcohol, fast food",
        "ai_help_preferences": ["Content ideas", "Scripts", "Hashtags"],
        "niche_focus": "Niche + Related trends",
        "content_style": "Balanced",
        "non_negotiable_rules": "No political content",
        "is_setup_complete": True,
        "current_step": 3,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def instagram_row(sample_user_id):
    """Instagram intelligence row as written by the research pipeline."""
    return {
        "id": 7,
        "user_id": sample_user_id,
        "username": "johndoe",
        "instagram_url": "https://instagram.com/johndoe",
        "full_name": "John Doe",
        "follower_count": 12500,
        "post_count": 340,
        "bio": "Tech tips daily",
        "primary_niche": "Technology",
        "sub_niches": ["Web Development", "Productivity"],
        "visual_aesthetics": "Clean desk setups",
        "tone_of_voice": "Friendly",
        "recurring_motifs": None,
        "storytelling_patterns": "Problem then solution",
        "editing_techniques": "Jump cuts",
        "performance_elements": None,
        "format_type": "Reels",
        "typical_context": "Home office",
        "overall_engagement_rate": "4.2%",
        "average_views_status": "Estimated",
        "average_likes_proxy": "~500",
        "data_limitation_note": None,
        "viral_post_description": "VS Code tricks",
        "viral_post_likes": 12000,
        "viral_post_comments": 310,
        "viral_post_impact": "Doubled follower growth",
        "target_demographics": "18-34",
        "target_interests": "Coding",
        "actual_demographics": None,
        "audience_evidence": None,
        "audience_alignment": "High",
        "audience_summary": "Junior developers",
        "key_content_themes": [{"theme": "Tooling", "description": "Editor tips"}],
        "representative_content_examples": [
            {"content_type": "Reel", "title_or_caption": "3 VS Code tricks", "theme": "Tooling"}
        ],
        "key_hashtags": [{"hashtag": "#coding", "category": "Niche"}, {"hashtag": "#tech", "category": "Broad"}],
        "raw_json": {"username": "johndoe"},
        "created_at": "2024-05-01T00:00:00Z",
    }
