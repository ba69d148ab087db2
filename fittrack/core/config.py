from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "FitTrack"
    LOG_LEVEL: str = "INFO"

    # Дневные цели по питанию
    DEFAULT_CALORIE_GOAL: int = 2000
    PROTEIN_GOAL_G: float = 150
    CARBS_GOAL_G: float = 250
    FATS_GOAL_G: float = 65

    DEFAULT_DISTANCE_GOAL_KM: float = 5
    PAGE_SIZE: int = 10

    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-1.5-flash"
    OPENROUTER_API_KEY: Optional[str] = None
    OPENROUTER_MODEL: str = "deepseek/deepseek-r1:free"
    AI_TIMEOUT_SECONDS: float = 30.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
