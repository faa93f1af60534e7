"""Runtime configuration and logging setup."""

from config.settings import Profile, Settings, is_domain_enabled, load_settings

__all__ = [
    "Profile",
    "Settings",
    "is_domain_enabled",
    "load_settings",
]
