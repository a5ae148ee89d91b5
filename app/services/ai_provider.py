"""AI provider service - plain text in, plain text out, with a fixed fallback."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import aiohttp

from app.config import settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised by a provider when the generation request fails."""


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    name = "provider"

    @abstractmethod
    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Generate response from AI."""

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if provider is properly configured."""

    @staticmethod
    def _timeout() -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=settings.ai_timeout_seconds)

    async def _post_json(self, url: str, payload: dict, headers: Optional[dict] = None) -> dict:
        try:
            async with aiohttp.ClientSession(timeout=self._timeout()) as session:
                async with session.post(url, json=payload, headers=headers) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise GenerationError(f"{self.name} API error ({response.status}): {error_text}")
                    return await response.json()
        except aiohttp.ClientError as e:
            raise GenerationError(f"{self.name} request failed: {e}") from e


class GeminiProvider(AIProvider):
    """Google Gemini generateContent API."""

    name = "Gemini"
    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, api_key: str, model: str = "gemini-1.5-flash"):
        self.api_key = api_key
        self.model = model

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        url = f"{self.BASE_URL}/{self.model}:generateContent?key={self.api_key}"

        full_prompt = prompt
        if system_prompt:
            full_prompt = f"{system_prompt}\n\n{prompt}"

        payload = {
            "contents": [{"parts": [{"text": full_prompt}]}],
            "generationConfig": {
                "temperature": settings.ai_temperature,
                "maxOutputTokens": settings.ai_max_tokens,
            },
        }

        data = await self._post_json(url, payload)
        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError) as e:
            raise GenerationError(f"Unexpected Gemini response: {data}") from e


class ChatCompletionsProvider(AIProvider):
    """Any OpenAI-compatible chat completions endpoint (Groq, OpenRouter)."""

    def __init__(self, name: str, base_url: str, api_key: str, model: str, extra_headers: Optional[dict] = None):
        self.name = name
        self.base_url = base_url
        self.api_key = api_key
        self.model = model
        self.extra_headers = extra_headers or {}

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            **self.extra_headers,
        }

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": settings.ai_temperature,
            "max_tokens": settings.ai_max_tokens,
        }

        data = await self._post_json(self.base_url, payload, headers=headers)
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError) as e:
            raise GenerationError(f"Unexpected {self.name} response: {data}") from e


class OllamaProvider(AIProvider):
    """Ollama provider for local models."""

    name = "Ollama"

    def __init__(self, base_url: str = "http://localhost:11434", model: str = "llama3.2"):
        self.base_url = base_url
        self.model = model

    def is_configured(self) -> bool:
        # Assumed reachable once enabled
        return True

    async def generate(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        full_prompt = prompt
        if system_prompt:
            full_prompt = f"{system_prompt}\n\n{prompt}"

        payload = {
            "model": self.model,
            "prompt": full_prompt,
            "stream": False,
            "options": {"temperature": settings.ai_temperature},
        }

        data = await self._post_json(f"{self.base_url}/api/generate", payload)
        return data.get("response", "")


def providers_from_settings() -> list[AIProvider]:
    """Providers enabled by configuration, in priority order."""
    providers: list[AIProvider] = []

    if settings.gemini_api_key:
        providers.append(GeminiProvider(api_key=settings.gemini_api_key, model=settings.gemini_model))

    if settings.groq_api_key:
        providers.append(
            ChatCompletionsProvider(
                name="Groq",
                base_url="https://api.groq.com/openai/v1/chat/completions",
                api_key=settings.groq_api_key,
                model=settings.groq_model,
            )
        )

    if settings.openrouter_api_key:
        providers.append(
            ChatCompletionsProvider(
                name="OpenRouter",
                base_url="https://openrouter.ai/api/v1/chat/completions",
                api_key=settings.openrouter_api_key,
                model=settings.openrouter_model,
                extra_headers={"HTTP-Referer": "https://github.com/sales-copilot"},
            )
        )

    if settings.ollama_enabled:
        providers.append(OllamaProvider(base_url=settings.ollama_base_url, model=settings.ollama_model))

    return providers


class AIService:
    """
    Unified text generation over the configured providers.

    Providers are tried in order: Gemini, Groq, OpenRouter, Ollama. Each is
    asked once; a failure moves on to the next. When every provider fails,
    or none is configured, ``fallback_value`` is returned.
    """

    def __init__(self, providers: Optional[list[AIProvider]] = None):
        self.providers: list[AIProvider] = providers if providers is not None else providers_from_settings()

    def is_available(self) -> bool:
        """Check if any AI provider is available."""
        return any(provider.is_configured() for provider in self.providers)

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        fallback_value: Optional[str] = None,
    ) -> Optional[str]:
        """Generate response using the first provider that succeeds."""
        for provider in self.providers:
            if not provider.is_configured():
                continue
            try:
                return await provider.generate(prompt, system_prompt)
            except Exception as e:
                logger.warning("Provider %s failed: %s", provider.name, e, extra={"provider": provider.name})

        if not self.providers:
            logger.info("No AI provider configured, using fallback text")
        return fallback_value


# Global AI service instance
ai_service = AIService()
