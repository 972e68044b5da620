from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    server_url: str = "http://localhost:4444"
    request_timeout: float = 120.0  # seconds
    user_agent: str | None = None  # None = figaro-webdriver/<version> (python)

    model_config = SettingsConfigDict(env_prefix="WEBDRIVER_")


def get_version() -> str:
    """Return the package version string."""
    try:
        from importlib.metadata import version

        return version("figaro-webdriver")
    except Exception:
        return "0.1.0"
