"""
Client de génération de texte (OpenAI Chat Completions).
Les routes le reçoivent par injection de dépendance (`get_text_generator`).
"""
import logging
from functools import lru_cache
from typing import Optional

from openai import AsyncOpenAI

from app.core.settings import get_settings

logger = logging.getLogger(__name__)


class TextGenerator:
    """Appel texte -> texte asynchrone, sans retry ni timeout spécifique"""

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not configured")
        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model
        logger.info(f"Client de generation de texte initialise (modele: {self.model})")

    async def generate(self, prompt: str, system: Optional[str] = None) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        response = await self.client.chat.completions.create(model=self.model, messages=messages)
        text = (response.choices[0].message.content or "").strip()
        logger.debug(f"Texte genere ({len(text)} caracteres)")
        return text


@lru_cache
def get_text_generator() -> TextGenerator:
    settings = get_settings()
    return TextGenerator(settings.OPENAI_API_KEY, settings.OPENAI_MODEL)
