# WARNING: This settings loader is for LOCAL DEVELOPMENT ONLY.
# Never commit your .env file or share your access token.
# Ensure .env is listed in .gitignore!

"""Settings loader for the Bangumi API client.

Loads the API endpoint and optional credentials from environment variables or
a .env file.

Recognised keys (all optional):
- BANGUMI_API_URL
- BANGUMI_ACCESS_TOKEN (sent as a bearer token; required for NSFW subjects)
- BANGUMI_USER_AGENT (Bangumi rejects requests without a descriptive agent)
- BANGUMI_TIMEOUT (seconds)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from bangumatch.__about__ import __version__

DEFAULT_API_URL = "https://api.bgm.tv"
DEFAULT_USER_AGENT = f"bangumatch/{__version__} (https://github.com/bangumatch/bangumatch)"


class Settings(BaseSettings):
    """Settings for the Bangumi API client."""

    BANGUMI_API_URL: str = DEFAULT_API_URL
    BANGUMI_ACCESS_TOKEN: str | None = None
    BANGUMI_USER_AGENT: str = DEFAULT_USER_AGENT
    BANGUMI_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def auth_headers(self) -> dict[str, str]:
        """Return the request headers derived from these settings."""
        headers = {"User-Agent": self.BANGUMI_USER_AGENT, "Accept": "application/json"}
        if self.BANGUMI_ACCESS_TOKEN:
            headers["Authorization"] = f"Bearer {self.BANGUMI_ACCESS_TOKEN}"
        return headers
