"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translator settings class
"""

from typed_i18n.configuration.settings import I18nSettings, Settings, settings

__all__ = ["settings", "Settings", "I18nSettings"]
