"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on port 3000.
Values are read when a ``Settings`` instance is created rather than
when this module is imported, which lets tests build an application
with their own settings.

The three behaviour switches correspond to the stricter checks the
service can apply:

* ``strict_ids`` rejects path identifiers that are not positive
  integers with HTTP 400 instead of treating them as unknown records.
* ``validate_email`` rejects e‑mail addresses that do not look like
  ``local@domain.tld``.
* ``use_envelope`` wraps responses as ``{"success": ..., "data": ...}``.
"""

import os
from dataclasses import dataclass, field


_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Contact List API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("PORT", 3000))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    strict_ids: bool = field(default_factory=lambda: _env_flag("STRICT_IDS", True))
    validate_email: bool = field(default_factory=lambda: _env_flag("VALIDATE_EMAIL", False))
    use_envelope: bool = field(default_factory=lambda: _env_flag("USE_ENVELOPE", False))

    # Whether a new store starts with the two sample contacts.
    seed_contacts: bool = field(default_factory=lambda: _env_flag("SEED_CONTACTS", True))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  ``create_app`` accepts an
# explicit ``Settings`` instance when a different configuration is
# needed.
settings = Settings()
