import logging
import re

from .errors import NotFound, ValidationFailure
from .models import Translation
from .providers import TranslationProvider
from .store import MAX_RECORD_ID, Page, RecordStore
from .validation import validate_request

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_translation_id(raw: str) -> int | None:
    """Route parameter to record id; ``None`` when it cannot name a stored record."""
    if not _ID_PATTERN.fullmatch(raw):
        return None
    translation_id = int(raw)
    if not -MAX_RECORD_ID - 1 <= translation_id <= MAX_RECORD_ID:
        return None
    return translation_id


class TranslationService:
    def __init__(self, provider: TranslationProvider, store: RecordStore) -> None:
        self.provider = provider
        self.store = store

    async def create_translation(self, text: str, source: str, target: str) -> int:
        """Validate, translate and persist a request; return the new record id.

        Each step raises on failure, so nothing is stored unless the provider
        produced a translation.
        """
        valid, reason = validate_request(text, source, target)
        if not valid:
            raise ValidationFailure(reason)

        source = source.lower()
        target = target.lower()
        translated = await self.provider.translate(text, source, target)

        translation_id = self.store.create(text, source, target, translated)
        logger.info("Created translation %s (%s -> %s)", translation_id, source, target)
        return translation_id

    def get_translation(self, raw_id: str) -> Translation:
        translation_id = parse_translation_id(raw_id)
        translation = self.store.get_by_id(translation_id) if translation_id is not None else None
        if translation is None:
            raise NotFound()
        return translation

    def list_translations(self, cursor: str | None = None) -> Page:
        return self.store.list(cursor)
