from pydantic import BaseModel


class TranslationCreatedResponse(BaseModel):
    id: int
    self: str


class TranslationItem(BaseModel):
    id: int
    text: str
    source: str
    target: str
    translated: str
    self: str


class TranslationPageResponse(BaseModel):
    items: list[TranslationItem]
    next: str | None = None


class TranslationDetailResponse(BaseModel):
    id: int
    text: str
    source: str
    target: str
    translation: str
    self: str


class ErrorResponse(BaseModel):
    Error: str
