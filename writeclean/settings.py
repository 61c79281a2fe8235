# writeclean/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv

# Ensure .env is loaded if present
load_dotenv()

class Settings(BaseSettings):
    # Directory with JSON lexicon overrides (stopwords.json, slang.json, ...)
    LEXICON_DIR: Optional[str] = None

    # Sentiment
    EMOTIONAL_SENTENCE_THRESHOLD: float = 0.5
    RECENCY_WEIGHT: float = 0.5
    SATURATION_ALPHA: float = 15.0
    NEGATION_WINDOW: int = 3

    # Language data: fetch missing NLTK corpora (stopwords, wordnet) on startup
    NLTK_DOWNLOAD: bool = True

    # Rewrite
    DEFAULT_TONE: str = "professional"  # or "formal", "friendly"

    # Server options
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Misc
    ENABLE_EXPLANATIONS: bool = True
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
