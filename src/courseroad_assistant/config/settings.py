from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Corpora: filesystem path or http(s) URL
    summary_corpus: str = "./data/MIT_EECS_Program_Requirements_Cleaned.txt"
    detailed_corpus: str = "./data/Cleaned_EECS_Degree_Requirements.txt"
    fetch_timeout: float = 30.0

    # OpenAI
    openai_api_key: str = ""
    openai_base_url: Optional[str] = None
    llm_model: str = "gpt-3.5-turbo"
    llm_temperature: float = 0.3
    llm_max_tokens: int = 500

    # Context budget (characters)
    summary_char_limit: int = 8000
    detail_char_limit: int = 20000

    # Section extraction
    program_prefix: str = "major"
    detailed_course: str = "6"
    section_keywords: list[str] = [
        "Science",
        "Engineering",
        "Intelligence",
        "Computer",
        "Electrical",
        "Molecular",
    ]

    # API auth (unset = disabled)
    api_bearer_token: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False  # This makes it work with LLM_MODEL or llm_model
    )

# Global settings instance
settings = Settings()
