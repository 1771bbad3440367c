"""
Tests du client de generation de texte (appel OpenAI asynchrone).
"""
import asyncio
from types import SimpleNamespace

import pytest
from openai import AsyncOpenAI

from app.domain.services.text_generator import TextGenerator


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestTextGenerator:

    def test_uses_async_client(self):
        generator = TextGenerator("sk-test", "gpt-test")
        assert isinstance(generator.client, AsyncOpenAI)
        assert asyncio.iscoroutinefunction(generator.generate)

    def test_generate_awaits_completion(self, monkeypatch):
        generator = TextGenerator("sk-test", "gpt-test")
        received = {}

        async def fake_create(model, messages):
            received["model"] = model
            received["messages"] = messages
            return _completion("  Respire lentement.  ")

        monkeypatch.setattr(generator.client.chat.completions, "create", fake_create)

        text = asyncio.run(generator.generate("Une citation", system="Tu es un guide"))

        assert text == "Respire lentement."
        assert received["model"] == "gpt-test"
        assert received["messages"] == [
            {"role": "system", "content": "Tu es un guide"},
            {"role": "user", "content": "Une citation"},
        ]

    def test_empty_content_is_empty_string(self, monkeypatch):
        generator = TextGenerator("sk-test", "gpt-test")

        async def fake_create(model, messages):
            return _completion(None)

        monkeypatch.setattr(generator.client.chat.completions, "create", fake_create)
        assert asyncio.run(generator.generate("x")) == ""

    def test_missing_api_key(self):
        with pytest.raises(RuntimeError):
            TextGenerator("", "gpt-test")
