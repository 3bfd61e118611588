"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the server binds to.
        port: Listening port, read from PORT.
        upstream_users_url: Base URL of the upstream users resource.
            The numeric id is appended as the last path segment.
        upstream_timeout_seconds: Total timeout for one upstream call.
        rate_limit_default: Rate limit applied to the user lookup route.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "User Relay"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    upstream_users_url: str = "https://jsonplaceholder.typicode.com/users"
    upstream_timeout_seconds: float = 10.0
    rate_limit_default: str = "120/minute"

    def user_url(self, user_id: int) -> str:
        """Return the upstream URL for a single user."""
        return f"{self.upstream_users_url.rstrip('/')}/{user_id}"


settings = Settings()
