from fittrack.core.config import settings
from fittrack.core.exceptions import InvalidArgument, AIServiceError, FoodAnalysisError

__all__ = ["settings", "InvalidArgument", "AIServiceError", "FoodAnalysisError"]
