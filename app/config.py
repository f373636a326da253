import os
from dotenv import load_dotenv
from typing import Dict, List, Any
from functools import lru_cache

load_dotenv()

class Settings:
    # Application Settings
    APP_NAME: str = os.getenv("APP_NAME", "PrepDeck API")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    # AI Request Settings (passed through to whichever client calls the provider)
    AI_TEMPERATURE: float = float(os.getenv("AI_TEMPERATURE", "0.3"))
    AI_MAX_TOKENS: int = int(os.getenv("AI_MAX_TOKENS", "3000"))
    DEFAULT_QUESTION_COUNT: int = int(os.getenv("DEFAULT_QUESTION_COUNT", "10"))

    # Free-text fallback limits used when the AI response has no parseable JSON
    FREE_TEXT_MAX_QUESTIONS: int = int(os.getenv("FREE_TEXT_MAX_QUESTIONS", "8"))
    FREE_TEXT_MAX_KEY_POINTS: int = int(os.getenv("FREE_TEXT_MAX_KEY_POINTS", "5"))
    FREE_TEXT_MAX_SKILLS: int = int(os.getenv("FREE_TEXT_MAX_SKILLS", "8"))
    ERROR_PREVIEW_LENGTH: int = int(os.getenv("ERROR_PREVIEW_LENGTH", "200"))

    # Question tagging keyword file
    QUESTION_TAGS_CONFIG: str = os.getenv("QUESTION_TAGS_CONFIG", "")

    # CORS Configuration
    CORS_ORIGINS: List[str] = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    CORS_METHODS: List[str] = os.getenv("CORS_METHODS", "GET,POST,OPTIONS").split(",")
    CORS_HEADERS: List[str] = os.getenv("CORS_HEADERS", "Content-Type,Authorization,X-Requested-With").split(",")
    CORS_MAX_AGE: int = int(os.getenv("CORS_MAX_AGE", "86400"))  # 24 hours

    @property
    def cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration."""
        return {
            "allow_origins": self.CORS_ORIGINS,
            "allow_credentials": True,
            "allow_methods": self.CORS_METHODS,
            "allow_headers": self.CORS_HEADERS,
            "max_age": self.CORS_MAX_AGE
        }

    @property
    def free_text_limits(self) -> Dict[str, int]:
        """Caps applied by the free-text fallback parser."""
        return {
            "questions": self.FREE_TEXT_MAX_QUESTIONS,
            "key_points": self.FREE_TEXT_MAX_KEY_POINTS,
            "skills": self.FREE_TEXT_MAX_SKILLS
        }

    def validate_configuration(self) -> List[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if not 0.0 <= self.AI_TEMPERATURE <= 2.0:
            issues.append(f"AI_TEMPERATURE must be between 0 and 2, got {self.AI_TEMPERATURE}")
        if self.AI_MAX_TOKENS <= 0:
            issues.append("AI_MAX_TOKENS must be positive")
        if self.DEFAULT_QUESTION_COUNT <= 0:
            issues.append("DEFAULT_QUESTION_COUNT must be positive")

        for name, value in self.free_text_limits.items():
            if value < 0:
                issues.append(f"Free-text limit for {name} cannot be negative")

        if self.ERROR_PREVIEW_LENGTH <= 0:
            issues.append("ERROR_PREVIEW_LENGTH must be positive")

        if self.QUESTION_TAGS_CONFIG and not os.path.exists(self.QUESTION_TAGS_CONFIG):
            issues.append(f"QUESTION_TAGS_CONFIG points to a missing file: {self.QUESTION_TAGS_CONFIG}")

        return issues

@lru_cache()
def get_settings():
    return Settings()

settings = get_settings()
