from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="SAY_", extra="ignore")

    # Default language when neither init() nor the dictionary supplies one
    FALLBACK_LANGUAGE: str = "en"

    # Extractor: file suffixes scanned for say() calls
    SOURCE_EXTENSIONS: list[str] = [
        ".ts",
        ".tsx",
        ".js",
        ".jsx",
        ".py",
        ".html",
        ".jinja",
        ".jinja2",
    ]

    # Extractor: directory names never descended into (dot-dirs are always skipped)
    EXCLUDED_DIRECTORIES: list[str] = [
        "node_modules",
        "dist",
        "build",
        ".git",
        "__pycache__",
        ".venv",
    ]

    LOG_LEVEL: str = "INFO"


settings = Settings()
