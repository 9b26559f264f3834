from pydantic import AnyUrl, TypeAdapter, ValidationError

from ogp_api.schemas.ogp import OGPData, ValidationChecks, ValidationResult

_url_adapter = TypeAdapter(AnyUrl)


def is_valid_url(value: str) -> bool:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def validate_ogp_data(data: OGPData) -> ValidationResult:
    """Classify problems in ``data`` as warnings (soft) or errors (hard).

    Missing title, description or image only warn; an image that does not
    parse as an absolute URL is the one hard error. The result depends on
    nothing but ``data``.
    """
    checks = ValidationChecks(
        has_title=data.title != "",
        has_description=data.description != "",
        has_image=data.image != "",
        url_valid=data.url != "",
    )
    warnings: list[str] = []
    errors: list[str] = []

    if not checks.has_title:
        warnings.append("Missing og:title tag")
    if not checks.has_description:
        warnings.append("Missing og:description tag")
    if not checks.has_image:
        warnings.append("Missing og:image tag")

    if checks.has_image:
        checks.image_valid = is_valid_url(data.image)
        if not checks.image_valid:
            errors.append("Invalid image URL")

    return ValidationResult(
        is_valid=not errors,
        warnings=warnings,
        errors=errors,
        checks=checks,
    )
