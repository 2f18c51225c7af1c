from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .database import get_db
from .providers import TranslationProvider
from .services import TranslationService
from .store import SqlRecordStore


def get_provider(request: Request) -> TranslationProvider:
    return request.app.state.provider


def get_service(
    provider: TranslationProvider = Depends(get_provider),
    db: Session = Depends(get_db),
) -> TranslationService:
    return TranslationService(provider=provider, store=SqlRecordStore(db))
