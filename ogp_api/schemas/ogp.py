from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class OGPRequest(BaseModel):
    url: str | None = None


class OGPData(BaseModel):
    title: str = ""
    description: str = ""
    image: str = ""
    url: str = ""
    type: str = ""
    site_name: str = ""
    image_width: str = ""
    image_height: str = ""
    image_alt: str = ""

    model_config = ConfigDict(frozen=True)


class ValidationChecks(BaseModel):
    has_title: bool = False
    has_description: bool = False
    has_image: bool = False
    image_valid: bool = False
    url_valid: bool = False


class ValidationResult(BaseModel):
    is_valid: bool = True
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    checks: ValidationChecks = Field(default_factory=ValidationChecks)


class PlatformPreview(BaseModel):
    platform: str
    title: str
    description: str
    image: str
    is_valid: bool = True
    warnings: list[str] = Field(default_factory=list)
    title_length: int
    desc_length: int
    max_title_len: int
    max_desc_len: int

    model_config = ConfigDict(frozen=True)


class PlatformPreviews(BaseModel):
    twitter: PlatformPreview
    facebook: PlatformPreview
    discord: PlatformPreview


class OGPResponse(BaseModel):
    url: str
    ogp_data: OGPData
    validation: ValidationResult
    previews: PlatformPreviews
    timestamp: datetime
