import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Library System"))
    app_version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "False"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    # CLI settings: plain | json | rich
    output_mode: str = field(default_factory=lambda: os.getenv("LIB_CLI_OUTPUT", "plain").lower())

    # Catalog policy
    # Reject a second book with an identifier that is already catalogued
    unique_identifiers: bool = field(default_factory=lambda: _env_flag("LIBRARY_UNIQUE_IDENTIFIERS", "True"))
    # Only the user holding a book may return it
    strict_returns: bool = field(default_factory=lambda: _env_flag("LIBRARY_STRICT_RETURNS", "False"))
    search_ignore_case: bool = field(default_factory=lambda: _env_flag("LIBRARY_SEARCH_IGNORE_CASE", "False"))

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


settings = Settings()
