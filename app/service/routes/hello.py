from fastapi.responses import PlainTextResponse

from app.service.core.constants import GREETING_TEXT


def hello() -> PlainTextResponse:
    """Статическое приветствие."""
    return PlainTextResponse(GREETING_TEXT)
