class InvalidArgument(ValueError):
    """Некорректные входные данные расчёта: пустая коллекция, отрицательные или нечисловые значения."""


class AIServiceError(Exception):
    """Ошибка внешнего AI-сервиса (статус, таймаут, формат ответа)."""


class FoodAnalysisError(AIServiceError):
    """Ответ модели не удалось разобрать как оценку питания."""
