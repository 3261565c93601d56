"""Render creator profile rows into prompt-ready text.

Every formatter is total: missing data becomes the ``-`` placeholder and
never raises. The creator profile template is consumed verbatim by
downstream prompts, so its labels, order and blank lines must not change.
"""

import json
from dataclasses import fields
from typing import Any

from ..models import CreatorProfileRow, GenericItem, InstagramCreatorProfileRow, parse_item

PLACEHOLDER = "-"

INSTAGRAM_BANNER = "=== INSTAGRAM CREATOR INTELLIGENCE ==="


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_field(value: Any) -> str:
    """Stringify and trim a scalar; None and '' become the placeholder."""
    if value is None or value == "":
        return PLACEHOLDER
    return _stringify(value).strip()


def format_array_field(values: Any) -> str:
    """Join list elements with ', ' in order; None and [] become the placeholder.

    A null element renders as an empty string.
    """
    if values is None:
        return PLACEHOLDER
    if isinstance(values, str):
        return format_field(values)
    if not isinstance(values, (list, tuple)) or len(values) == 0:
        return PLACEHOLDER
    return ", ".join("" if v is None else _stringify(v) for v in values)


def _render_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(_render_value(v) for v in value) or PLACEHOLDER
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    return format_field(value)


def _render_item(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, GenericItem):
        pairs = item.items
    else:
        pairs = tuple((f.name, getattr(item, f.name)) for f in fields(item))
    return ", ".join(f"{key}: {_render_value(value)}" for key, value in pairs)


def format_json_array_field(values: Any) -> str:
    """Render a JSON array of strings/objects.

    Objects become ``key: value`` pairs joined by ', '; elements are joined
    by '; '. Anything that is not a non-empty list becomes the placeholder.
    """
    if not isinstance(values, list) or not values:
        return PLACEHOLDER
    return "; ".join(_render_item(parse_item(v)) for v in values)


def render_creator_profile(creator: CreatorProfileRow) -> str:
    """Render the three-section creator profile block."""
    f = format_field
    a = format_array_field
    return f"""Section 1 – Creator Profile & Brand
Full Name: {f(creator.full_name)}
Age: {f(creator.age)}
Location: {f(creator.location)}
Primary Language: {f(creator.primary_language)}
Main Focus Platform: {f(creator.main_focus_platform)}
Other Platforms: {f(creator.other_platforms)}
Niche: {f(creator.primary_niche)}
Target Audience: {a(creator.target_audience)}
Brand Words: {f(creator.brand_words)}
Followers: {f(creator.total_followers)}
Average Views: {f(creator.average_views)}

Section 2 – Content Style & Workflow
Content Formats: {a(creator.content_formats)}
Typical Length & Unit: {f(creator.typical_length_number)} {f(creator.typical_length_unit)}
Inspirations/Competitors: {f(creator.editing_music_style)}
Short-Term Goals (3 months): {f(creator.short_term_goals)}
Long-Term Goals (1–3 years): {f(creator.long_term_goals)}

Section 3 – Growth, Monetization & AI Personalization
Biggest Strengths: {f(creator.strengths)}
Biggest Challenges: {f(creator.biggest_challenge)}
Income Streams: {a(creator.income_streams)}
Brand Types to Avoid: {f(creator.brand_types_to_avoid)}
AI Assistance Preferences: {a(creator.ai_help_preferences)}
Content Exploration Mode: {f(creator.niche_focus)}"""


# (heading, [(label, attribute, formatter), ...])
_INSTAGRAM_SECTIONS: list[tuple[str, list[tuple[str, str, Any]]]] = [
    (
        "Profile Overview",
        [
            ("Username", "username", format_field),
            ("Full Name", "full_name", format_field),
            ("Followers", "follower_count", format_field),
            ("Posts", "post_count", format_field),
            ("Bio", "bio", format_field),
        ],
    ),
    (
        "Niche",
        [
            ("Primary Niche", "primary_niche", format_field),
            ("Sub-Niches", "sub_niches", format_array_field),
        ],
    ),
    (
        "Brand Style",
        [
            ("Visual Aesthetics", "visual_aesthetics", format_field),
            ("Tone of Voice", "tone_of_voice", format_field),
            ("Recurring Motifs", "recurring_motifs", format_field),
        ],
    ),
    (
        "Content Making Style",
        [
            ("Storytelling Patterns", "storytelling_patterns", format_field),
            ("Editing Techniques", "editing_techniques", format_field),
            ("Performance Elements", "performance_elements", format_field),
        ],
    ),
    (
        "Content Format & Context",
        [
            ("Format Type", "format_type", format_field),
            ("Typical Context", "typical_context", format_field),
        ],
    ),
    (
        "Engagement & Performance",
        [
            ("Overall Engagement Rate", "overall_engagement_rate", format_field),
            ("Average Views Status", "average_views_status", format_field),
            ("Average Likes Proxy", "average_likes_proxy", format_field),
            ("Data Limitation Note", "data_limitation_note", format_field),
        ],
    ),
    (
        "Viral Content",
        [
            ("Viral Post Description", "viral_post_description", format_field),
            ("Viral Post Likes", "viral_post_likes", format_field),
            ("Viral Post Comments", "viral_post_comments", format_field),
            ("Viral Post Impact", "viral_post_impact", format_field),
        ],
    ),
    (
        "Audience",
        [
            ("Target Demographics", "target_demographics", format_field),
            ("Target Interests", "target_interests", format_field),
            ("Actual Demographics", "actual_demographics", format_field),
            ("Audience Evidence", "audience_evidence", format_field),
            ("Audience Alignment", "audience_alignment", format_field),
            ("Audience Summary", "audience_summary", format_field),
        ],
    ),
    (
        "Content Intelligence",
        [
            ("Key Content Themes", "key_content_themes", format_json_array_field),
            ("Representative Content Examples", "representative_content_examples", format_json_array_field),
            ("Key Hashtags", "key_hashtags", format_json_array_field),
        ],
    ),
]

# Columns that identify the row rather than describe the creator.
_INSTAGRAM_IDENTITY_COLUMNS = {"id", "user_id", "username", "instagram_url", "raw_json", "created_at"}


def _has_structured_data(profile: InstagramCreatorProfileRow) -> bool:
    for f in fields(profile):
        if f.name in _INSTAGRAM_IDENTITY_COLUMNS:
            continue
        value = getattr(profile, f.name)
        if value not in (None, "", [], {}):
            return True
    return False


def render_instagram_intelligence(profile: InstagramCreatorProfileRow) -> str:
    """Render the banner followed by labelled intelligence sections."""
    blocks = [INSTAGRAM_BANNER]
    for heading, rows in _INSTAGRAM_SECTIONS:
        lines = [heading]
        for label, attr, formatter in rows:
            lines.append(f"{label}: {formatter(getattr(profile, attr))}")
        blocks.append("\n".join(lines))

    if profile.raw_json and not _has_structured_data(profile):
        raw = profile.raw_json
        if not isinstance(raw, str):
            raw = json.dumps(raw, ensure_ascii=False, sort_keys=True, indent=2)
        blocks.append(f"Raw Intelligence Data\n{raw}")

    return "\n\n".join(blocks)
