from fittrack.services.ai_service import AIService, ai_service


def get_ai_service() -> AIService:
    """Фабрика AI-клиента - инжектируется в эндпоинты через Depends."""
    return ai_service
