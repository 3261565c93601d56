"""Typed views over creator profile rows.

Rows arrive from the profile store as plain mappings. Unknown columns are
ignored and missing ones default to ``None`` so partially-populated rows from
an in-progress onboarding wizard are always representable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any


def _from_mapping(cls: type, row: Mapping[str, Any]) -> Any:
    names = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in row.items() if k in names})


@dataclass
class CreatorProfileRow:
    """One creator's onboarding record (``creators`` table)."""

    id: str | None = None
    user_id: str | None = None

    # Section 1: creator profile & brand
    full_name: str | None = None
    age: int | None = None
    location: str | None = None
    primary_language: str | None = None
    platforms: list[str] | None = None
    main_focus_platform: str | None = None
    other_platforms: str | None = None
    primary_niche: str | None = None
    sub_niche: str | None = None
    target_audience: list[str] | None = None
    other_niche: str | None = None
    other_target_audience: str | None = None
    brand_words: str | None = None
    tone_style: str | None = None
    total_followers: int | None = None
    average_views: int | None = None

    # Section 2: content style & creative direction
    content_formats: list[str] | None = None
    typical_length_number: int | None = None
    typical_length_unit: str | None = None
    other_formats: str | None = None
    on_camera: str | None = None
    use_voiceovers: str | None = None
    editing_music_style: str | None = None
    short_term_goals: str | None = None
    long_term_goals: str | None = None
    posting_frequency: int | None = None
    posting_schedule: str | None = None
    biggest_challenge: str | None = None

    # Section 3: growth, monetization & AI personalization
    strengths: str | None = None
    weaknesses: str | None = None
    income_streams: list[str] | None = None
    brand_types_to_avoid: str | None = None
    ai_help_preferences: list[str] | None = None
    niche_focus: str | None = None
    content_style: str | None = None
    non_negotiable_rules: str | None = None

    # Setup status
    is_setup_complete: bool | None = None
    current_step: int | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> CreatorProfileRow:
        return _from_mapping(cls, row)


@dataclass
class InstagramCreatorProfileRow:
    """Deep-research intelligence about one creator's Instagram presence."""

    id: int | str | None = None
    user_id: str | None = None
    username: str | None = None
    instagram_url: str | None = None
    full_name: str | None = None
    follower_count: int | None = None
    post_count: int | None = None
    bio: str | None = None

    # Niche
    primary_niche: str | None = None
    sub_niches: list[str] | None = None

    # Brand style
    visual_aesthetics: str | None = None
    tone_of_voice: str | None = None
    recurring_motifs: str | None = None

    # Content making style
    storytelling_patterns: str | None = None
    editing_techniques: str | None = None
    performance_elements: str | None = None

    # Content format & context
    format_type: str | None = None
    typical_context: str | None = None

    # Engagement, views & likes
    overall_engagement_rate: str | None = None
    average_views_status: str | None = None
    average_likes_proxy: str | None = None
    data_limitation_note: str | None = None

    # Viral content
    viral_post_description: str | None = None
    viral_post_likes: int | None = None
    viral_post_comments: int | None = None
    viral_post_impact: str | None = None

    # Audience
    target_demographics: str | None = None
    target_interests: str | None = None
    actual_demographics: str | None = None
    audience_evidence: str | None = None
    audience_alignment: str | None = None
    audience_summary: str | None = None

    # Nested data (JSON arrays of objects)
    key_content_themes: list[Any] | None = None
    representative_content_examples: list[Any] | None = None
    key_hashtags: list[Any] | None = None

    raw_json: Any = None
    created_at: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> InstagramCreatorProfileRow:
        return _from_mapping(cls, row)


# --- Intelligence items ---


@dataclass(frozen=True)
class KeyContentTheme:
    theme: Any = None
    description: Any = None


@dataclass(frozen=True)
class RepresentativeContentExample:
    content_type: Any = None
    title_or_caption: Any = None
    theme: Any = None


@dataclass(frozen=True)
class KeyHashtag:
    hashtag: Any = None
    category: Any = None


@dataclass(frozen=True)
class GenericItem:
    """Object of an unrecognised shape; rendered key by key in original order."""

    items: tuple[tuple[str, Any], ...] = field(default_factory=tuple)


IntelligenceItem = KeyContentTheme | RepresentativeContentExample | KeyHashtag | GenericItem | str


def parse_item(value: Any) -> IntelligenceItem:
    """Pick the known shape for a JSON-array element by its exact key set."""
    if value is None:
        return ""
    if not isinstance(value, Mapping):
        return value if isinstance(value, str) else str(value)

    keys = set(value)
    if keys == {"theme", "description"}:
        return KeyContentTheme(theme=value["theme"], description=value["description"])
    if keys == {"hashtag", "category"}:
        return KeyHashtag(hashtag=value["hashtag"], category=value["category"])
    if keys == {"content_type", "title_or_caption", "theme"}:
        return RepresentativeContentExample(
            content_type=value["content_type"],
            title_or_caption=value["title_or_caption"],
            theme=value["theme"],
        )
    return GenericItem(items=tuple(value.items()))
