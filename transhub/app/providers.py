"""Translation providers: the external call that turns text into its translation."""

import asyncio
import logging
from abc import ABC, abstractmethod

import google.auth
import httpx
from google.auth.credentials import Credentials
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as AuthRequest

from . import config
from .errors import ProviderFailure

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/v3"
CLOUD_TRANSLATION_SCOPE = "https://www.googleapis.com/auth/cloud-translation"


class TranslationProvider(ABC):
    @abstractmethod
    async def translate(self, text: str, source: str, target: str) -> str:
        """Translate ``text`` from ``source`` to ``target``.

        Raises:
            ProviderFailure: the provider could not be reached or returned an
                unusable response.
        """

    async def close(self) -> None:
        return None


class EchoProvider(TranslationProvider):
    """Returns the input text unchanged. For local development and tests."""

    async def translate(self, text: str, source: str, target: str) -> str:
        return text


class GoogleTranslateProvider(TranslationProvider):
    """Google Cloud Translation v3 ``translateText`` over REST.

    Authenticates with Application Default Credentials, refreshing the access
    token whenever it has expired.
    """

    def __init__(
        self,
        project_id: str = config.GOOGLE_PROJECT_ID,
        location: str = config.GOOGLE_LOCATION,
        timeout_seconds: float = config.TRANSLATION_TIMEOUT_SECONDS,
        credentials: Credentials | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if credentials is None:
            credentials, default_project = google.auth.default(scopes=[CLOUD_TRANSLATION_SCOPE])
            project_id = project_id or default_project
        if not project_id:
            raise ValueError("GOOGLE_PROJECT_ID is required for the google provider")

        self.credentials = credentials
        self.parent = f"projects/{project_id}/locations/{location}"
        self._client = client or httpx.AsyncClient(base_url=GOOGLE_TRANSLATE_URL, timeout=timeout_seconds)

    async def _auth_headers(self) -> dict[str, str]:
        if not self.credentials.valid:
            try:
                await asyncio.to_thread(self.credentials.refresh, AuthRequest())
            except GoogleAuthError:
                logger.exception("Could not refresh Google credentials")
                raise ProviderFailure()
        return {"Authorization": f"Bearer {self.credentials.token}"}

    async def translate(self, text: str, source: str, target: str) -> str:
        payload = {
            "contents": [text],
            "mimeType": "text/plain",
            "sourceLanguageCode": source,
            "targetLanguageCode": target,
        }
        headers = await self._auth_headers()

        try:
            response = await self._client.post(f"/{self.parent}:translateText", json=payload, headers=headers)
            response.raise_for_status()
            translated = response.json()["translations"][0]["translatedText"]
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Google Translate API error: %s %s",
                exc.response.status_code,
                exc.response.reason_phrase,
            )
            raise ProviderFailure()
        except httpx.RequestError:
            logger.exception("Google Translate request failed")
            raise ProviderFailure()
        except (ValueError, KeyError, IndexError, TypeError):
            logger.exception("Google Translate returned an unexpected payload")
            raise ProviderFailure()

        if not isinstance(translated, str):
            logger.error("Google Translate returned a non-text translation: %r", type(translated).__name__)
            raise ProviderFailure()
        return translated

    async def close(self) -> None:
        await self._client.aclose()


PROVIDERS: dict[str, type[TranslationProvider]] = {
    "echo": EchoProvider,
    "google": GoogleTranslateProvider,
}


def load_provider(name: str, **kwargs) -> TranslationProvider:
    cls = PROVIDERS.get(name)
    if cls is None:
        raise ValueError(f"Unknown provider '{name}'. Available: {list(PROVIDERS.keys())}")
    return cls(**kwargs)
