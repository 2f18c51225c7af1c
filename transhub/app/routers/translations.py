from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response, status

from ..deps import get_service
from ..errors import InvalidBody, MissingField, NotAcceptable, NullField, UnsupportedMediaType
from ..models import Translation
from ..schemas import (
    ErrorResponse,
    TranslationCreatedResponse,
    TranslationDetailResponse,
    TranslationItem,
    TranslationPageResponse,
)
from ..services import TranslationService

router = APIRouter(tags=["translations"])

REQUIRED_FIELDS = ("text", "source", "target")
JSON_MEDIA_TYPE = "application/json"
# Methods refused on both routes with 405 and an Allow header
OTHER_METHODS = ["PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "TRACE"]


def _media_type(header: str | None) -> str:
    return (header or "").split(";", 1)[0].strip().lower()


def accepts_json(accept: str | None) -> bool:
    """Whether an Accept header admits application/json. A missing header accepts anything."""
    if not accept or not accept.strip():
        return True

    for media_range in accept.split(","):
        media_type, *params = [part.strip() for part in media_range.split(";")]
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0 and media_type.lower() in (JSON_MEDIA_TYPE, "application/*", "*/*"):
            return True
    return False


def _item_url(request: Request, translation_id: int) -> str:
    return str(request.url_for("get_translation", translation_id=str(translation_id)))


def _method_not_allowed(allow: str) -> Response:
    return Response(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, headers={"Allow": allow})


@router.post(
    "/",
    response_model=TranslationCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 415: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def create_translation(
    request: Request,
    service: TranslationService = Depends(get_service),
) -> TranslationCreatedResponse:
    if _media_type(request.headers.get("content-type")) != JSON_MEDIA_TYPE:
        raise UnsupportedMediaType()

    try:
        body: Any = await request.json()
    except ValueError:
        raise InvalidBody()

    if not isinstance(body, dict) or any(field not in body for field in REQUIRED_FIELDS):
        raise MissingField()
    if any(body[field] is None for field in REQUIRED_FIELDS):
        raise NullField()

    translation_id = await service.create_translation(body["text"], body["source"], body["target"])
    return TranslationCreatedResponse(id=translation_id, self=_item_url(request, translation_id))


@router.get("/", response_model=TranslationPageResponse, response_model_exclude_none=True)
def list_translations(
    request: Request,
    cursor: str | None = Query(default=None),
    service: TranslationService = Depends(get_service),
) -> TranslationPageResponse:
    page = service.list_translations(cursor)

    items = [
        TranslationItem(
            id=translation.id,
            text=translation.text,
            source=translation.source,
            target=translation.target,
            translated=translation.translated,
            self=_item_url(request, translation.id),
        )
        for translation in page.items
    ]

    next_url = None
    if page.next_cursor is not None:
        next_url = str(request.url_for("list_translations").include_query_params(cursor=page.next_cursor))
    return TranslationPageResponse(items=items, next=next_url)


@router.api_route("/", methods=OTHER_METHODS, include_in_schema=False)
def collection_method_not_allowed() -> Response:
    return _method_not_allowed("GET, POST")


@router.get(
    "/{translation_id}",
    response_model=TranslationDetailResponse,
    responses={404: {"model": ErrorResponse}, 406: {"model": ErrorResponse}},
)
def get_translation(
    translation_id: str,
    request: Request,
    service: TranslationService = Depends(get_service),
) -> TranslationDetailResponse:
    translation: Translation = service.get_translation(translation_id)

    if not accepts_json(request.headers.get("accept")):
        raise NotAcceptable()

    return TranslationDetailResponse(
        id=translation.id,
        text=translation.text,
        source=translation.source,
        target=translation.target,
        translation=translation.translated,
        self=_item_url(request, translation.id),
    )


@router.api_route("/{translation_id}", methods=["POST", *OTHER_METHODS], include_in_schema=False)
def item_method_not_allowed() -> Response:
    return _method_not_allowed("GET")
