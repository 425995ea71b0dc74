"""Translation engine settings."""

from typing import Optional

from pydantic import Field, field_validator

from tree_i18n.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for resource lookup and locale selection.

    Environment Variables:
        I18N_BASE_PATH: Directory holding the translation resources (default: assets/i18n)
        I18N_FALLBACK_FILE: Locale-independent resource base name loaded when the
            locale-specific one fails (default: en)
        I18N_USE_COUNTRY_CODE: Append "_<region>" to the resource name (default: False)
        I18N_FORCED_LOCALE: Locale override such as "fr_FR"; bypasses device detection

    Example:
        ```python
        from tree_i18n.services import get_settings

        settings = get_settings()

        base_path = settings.i18n.base_path
        if settings.i18n.use_country_code:
            # Resource names become en_US.json, fr_CA.yaml...
        ```
    """

    base_path: str = Field(
        default="assets/i18n",
        alias="I18N_BASE_PATH",
        description="Directory holding the translation resources",
    )
    fallback_file: str = Field(
        default="en",
        alias="I18N_FALLBACK_FILE",
        description="Resource base name (no extension) used when locale loading fails",
    )
    use_country_code: bool = Field(
        default=False,
        alias="I18N_USE_COUNTRY_CODE",
        description="Compose resource names as <language>_<region>",
    )
    forced_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FORCED_LOCALE",
        description="Explicit locale override, e.g. 'fr_FR'",
    )

    @field_validator("forced_locale", mode="before")
    @classmethod
    def blank_forced_locale_is_unset(cls, value):
        """Treat an empty I18N_FORCED_LOCALE as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value
