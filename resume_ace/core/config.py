"""
Runtime configuration for Resume Ace API.

Settings are read once from the environment (a local .env file is honoured)
and passed explicitly to the components that need them.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional

from dotenv import load_dotenv

from resume_ace.core.errors import ConfigError

# ✅ Deployment variants: same pipeline, different origin/port
VARIANTS: Dict[str, Dict[str, object]] = {
    "primary": {"cors_origin": "https://resume-ace.vercel.app", "port": 3000},
    "secondary": {"cors_origin": "http://localhost:5173", "port": 3002},
}

# ✅ LLM providers and the env var holding each one's credential
PROVIDER_KEY_VARS: Dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}

DEFAULT_MODELS: Dict[str, str] = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}

PDF_MIME_TYPE = "application/pdf"
MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5MB

CORS_METHODS: List[str] = ["GET", "POST", "OPTIONS"]
CORS_HEADERS: List[str] = ["Content-Type", "Accept"]


@dataclass
class Settings:
    """Explicit application configuration."""
    api_key: str
    llm_provider: str = "gemini"
    llm_model: Optional[str] = None
    variant: str = "primary"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origin: str = "https://resume-ace.vercel.app"
    app_env: str = "production"
    upload_dir: str = "uploads"
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    cors_methods: List[str] = field(default_factory=lambda: list(CORS_METHODS))
    cors_headers: List[str] = field(default_factory=lambda: list(CORS_HEADERS))

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @property
    def model(self) -> str:
        return self.llm_model or DEFAULT_MODELS.get(self.llm_provider, "")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ConfigError: Unknown provider/variant, missing credential or bad number
        """
        env = os.environ if environ is None else environ

        provider = env.get("LLM_PROVIDER", "gemini").strip().lower()
        if provider not in PROVIDER_KEY_VARS:
            raise ConfigError(f"Unsupported LLM_PROVIDER: {provider}")

        key_var = PROVIDER_KEY_VARS[provider]
        api_key = (env.get(key_var) or "").strip()
        if not api_key:
            raise ConfigError(f"{key_var} not found in environment variables")

        variant = env.get("DEPLOYMENT_VARIANT", "primary").strip().lower()
        if variant not in VARIANTS:
            raise ConfigError(f"Unknown DEPLOYMENT_VARIANT: {variant}")
        defaults = VARIANTS[variant]

        return cls(
            api_key=api_key,
            llm_provider=provider,
            llm_model=env.get("LLM_MODEL") or None,
            variant=variant,
            host=env.get("HOST", "0.0.0.0"),
            port=_int_var(env, "PORT", defaults["port"]),
            cors_origin=env.get("CORS_ORIGIN") or defaults["cors_origin"],
            app_env=env.get("APP_ENV", "production"),
            upload_dir=env.get("UPLOAD_DIR", "uploads"),
            max_upload_bytes=_int_var(env, "MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES),
            log_level=env.get("LOG_LEVEL", "INFO"),
            log_dir=env.get("LOG_DIR") or None,
        )


def _int_var(env, name: str, default) -> int:
    raw = env.get(name)
    if raw in (None, ""):
        return int(default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


@lru_cache()
def get_settings() -> Settings:
    """Load .env once and return the process settings."""
    load_dotenv()
    return Settings.from_env()
