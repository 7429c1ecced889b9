import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True

    # Career engine settings
    taxonomy_path: str = ""  # optional JSON category table; built-in table when empty
    trace_enabled: bool = False  # attach category counts to every analysis
    alternative_paths_limit: int = 3
    strength_areas_limit: int = 3

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
