from dataclasses import dataclass

from ogp_api.schemas.ogp import OGPData, PlatformPreview, PlatformPreviews

ELLIPSIS = "..."


@dataclass(frozen=True)
class PlatformProfile:
    name: str
    label: str
    max_title_len: int
    max_desc_len: int


PLATFORMS: tuple[PlatformProfile, ...] = (
    PlatformProfile("twitter", "Twitter", max_title_len=70, max_desc_len=200),
    PlatformProfile("facebook", "Facebook", max_title_len=100, max_desc_len=300),
    PlatformProfile("discord", "Discord", max_title_len=256, max_desc_len=2048),
)


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to exactly ``limit`` characters, ending in an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def generate_preview(data: OGPData, profile: PlatformProfile) -> PlatformPreview:
    title_length = len(data.title)
    desc_length = len(data.description)

    warnings: list[str] = []
    if title_length > profile.max_title_len:
        warnings.append(
            f"Title exceeds {profile.label} limit ({profile.max_title_len} characters)"
        )
    if desc_length > profile.max_desc_len:
        warnings.append(
            f"Description exceeds {profile.label} limit "
            f"({profile.max_desc_len} characters)"
        )

    return PlatformPreview(
        platform=profile.name,
        title=truncate(data.title, profile.max_title_len),
        description=truncate(data.description, profile.max_desc_len),
        image=data.image,
        is_valid=True,
        warnings=warnings,
        title_length=title_length,
        desc_length=desc_length,
        max_title_len=profile.max_title_len,
        max_desc_len=profile.max_desc_len,
    )


def generate_previews(data: OGPData) -> PlatformPreviews:
    return PlatformPreviews(
        **{profile.name: generate_preview(data, profile) for profile in PLATFORMS}
    )
