import pytest

from ogp_api.schemas import OGPData
from ogp_api.services.previews import (
    PLATFORMS,
    PlatformProfile,
    generate_preview,
    generate_previews,
    truncate,
)


@pytest.mark.parametrize(
    "text, limit, expected",
    [
        ("short", 10, "short"),
        ("this is a very long string", 10, "this is..."),
        ("exactly 10", 10, "exactly 10"),
        ("", 10, ""),
    ],
)
def test_truncate(text, limit, expected):
    assert truncate(text, limit) == expected


def test_truncate_is_idempotent():
    once = truncate("x" * 120, 70)

    assert truncate(once, 70) == once


@pytest.mark.parametrize("length", [71, 80, 500])
def test_truncated_text_has_exact_limit_length(length):
    result = truncate("a" * length, 70)

    assert len(result) == 70
    assert result.endswith("...")


def test_truncate_counts_characters_not_bytes():
    text = "é" * 70

    assert truncate(text, 70) == text


def test_long_title_truncated_for_twitter_only():
    title = "t" * 80
    previews = generate_previews(OGPData(title=title, description="Short"))

    twitter = previews.twitter
    assert len(twitter.title) == 70
    assert twitter.title.endswith("...")
    assert twitter.title_length == 80
    assert "Title exceeds Twitter limit (70 characters)" in twitter.warnings

    facebook = previews.facebook
    assert facebook.title == title
    assert facebook.title_length == 80
    assert facebook.warnings == []


def test_long_description_warns_per_platform():
    description = "d" * 250
    previews = generate_previews(OGPData(description=description))

    assert previews.twitter.warnings == [
        "Description exceeds Twitter limit (200 characters)"
    ]
    assert len(previews.twitter.description) == 200
    assert previews.twitter.desc_length == 250
    assert previews.facebook.description == description
    assert previews.discord.warnings == []


def test_previews_carry_platform_limits_and_image():
    data = OGPData(title="Title", description="Desc", image="https://example.com/i.png")
    previews = generate_previews(data)

    limits = {
        name: (getattr(previews, name).max_title_len, getattr(previews, name).max_desc_len)
        for name in ("twitter", "facebook", "discord")
    }
    assert limits == {
        "twitter": (70, 200),
        "facebook": (100, 300),
        "discord": (256, 2048),
    }
    for name in limits:
        preview = getattr(previews, name)
        assert preview.platform == name
        assert preview.image == "https://example.com/i.png"
        assert preview.is_valid is True


def test_each_profile_checks_its_own_limits():
    # A profile looser on titles than on descriptions is still judged on its own
    profile = PlatformProfile("odd", "Odd", max_title_len=5, max_desc_len=500)
    preview = generate_preview(OGPData(title="Too long", description="fine"), profile)

    assert preview.title == "To..."
    assert preview.warnings == ["Title exceeds Odd limit (5 characters)"]


def test_platform_profiles_are_the_three_supported():
    assert [profile.name for profile in PLATFORMS] == ["twitter", "facebook", "discord"]
