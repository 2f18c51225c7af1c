import base64
import binascii
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import InvalidCursor, StoreFailure
from .models import Translation

logger = logging.getLogger(__name__)

PAGE_SIZE = 5
# Signed 64-bit INTEGER column
MAX_RECORD_ID = 2**63 - 1


@dataclass
class Page:
    items: list[Translation] = field(default_factory=list)
    next_cursor: str | None = None


def encode_cursor(last_id: int) -> str:
    raw = json.dumps({"after": last_id}, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cursor(cursor: str) -> int:
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
    except (UnicodeEncodeError, binascii.Error, ValueError):
        raise InvalidCursor()

    after = data.get("after") if isinstance(data, dict) else None
    # bool is an int subclass
    if not isinstance(after, int) or isinstance(after, bool) or not 0 <= after <= MAX_RECORD_ID:
        raise InvalidCursor()
    return after


class RecordStore(ABC):
    """Durable keyed collection of translation records."""

    @abstractmethod
    def create(self, text: str, source: str, target: str, translated: str) -> int:
        """Persist a new record and return its generated id once committed."""

    @abstractmethod
    def get_by_id(self, translation_id: int) -> Translation | None:
        ...

    @abstractmethod
    def list(self, cursor: str | None = None) -> Page:
        """Return up to PAGE_SIZE records in insertion order, resuming at ``cursor``."""


class SqlRecordStore(RecordStore):
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, text: str, source: str, target: str, translated: str) -> int:
        record = Translation(text=text, source=source, target=target, translated=translated)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to persist translation record")
            raise StoreFailure()
        return record.id

    def get_by_id(self, translation_id: int) -> Translation | None:
        try:
            return self.db.get(Translation, translation_id)
        except SQLAlchemyError:
            logger.exception("Failed to load translation %s", translation_id)
            raise StoreFailure()

    def list(self, cursor: str | None = None) -> Page:
        query = select(Translation).order_by(Translation.id).limit(PAGE_SIZE + 1)
        if cursor is not None:
            query = query.where(Translation.id > decode_cursor(cursor))

        try:
            rows = list(self.db.execute(query).scalars().all())
        except SQLAlchemyError:
            logger.exception("Failed to list translations")
            raise StoreFailure()

        items = rows[:PAGE_SIZE]
        next_cursor = encode_cursor(items[-1].id) if len(rows) > PAGE_SIZE else None
        return Page(items=items, next_cursor=next_cursor)
