"""typed-i18n configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translator configuration.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used when none is requested (default: en)
        I18N_WARN_ON_MISSING: Log a warning when every fallback tier is empty
            (default: True)

    Example:
        ```python
        from typed_i18n.configuration import settings

        default_language = settings.i18n.DEFAULT_LANGUAGE
        ```
    """

    DEFAULT_LANGUAGE: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language code used when no language is requested",
    )
    WARN_ON_MISSING: bool = Field(
        default=True,
        alias="I18N_WARN_ON_MISSING",
        description="Log a warning when a message resolves to an empty string",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """typed-i18n configuration settings - main aggregator.

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
