import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .database import Base, engine
from .errors import TranslationApiError
from .providers import load_provider
from .routers import translations

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    app.state.provider = load_provider(config.TRANSLATION_PROVIDER)
    logger.info("Translation provider: %s", config.TRANSLATION_PROVIDER)
    try:
        yield
    finally:
        await app.state.provider.close()


app = FastAPI(
    title="TransHub API",
    version="0.1.0",
    description="Text translation requests persisted as browsable records",
    lifespan=lifespan,
)


@app.exception_handler(TranslationApiError)
async def translation_api_error_handler(_: Request, exc: TranslationApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"Error": exc.message})


app.include_router(translations.router)
