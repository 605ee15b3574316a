"""Aplicação FastAPI com as rotas de notícias e o canal em tempo real."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from pulso.container import NewsContainer, build_news_container
from pulso.domain import ArticleNotFoundError, ArticleStoreError
from pulso.logging_config import configure_logging
from pulso.realtime.transports import create_realtime_router
from pulso.schemas import ArticlePayload, ArticleResponse, ErrorResponse
from pulso.settings import (
    get_api_bind_host,
    get_api_port,
    get_cors_origins,
    get_log_level,
)

log = logging.getLogger("pulso.api")

ROOT_MESSAGE = "Pulso News API is running..."
NOT_FOUND_MESSAGE = "Notícia não encontrada"


def configure_cors(app: FastAPI) -> None:
    """Aplica a configuração de CORS utilizada pelo serviço."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(get_cors_origins()),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def register_error_handlers(app: FastAPI) -> None:
    """Traduz erros de domínio em status HTTP com corpo ``{"error": ...}``."""

    @app.exception_handler(ArticleNotFoundError)
    async def handle_not_found(
        request: Request, exc: ArticleNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})

    @app.exception_handler(ArticleStoreError)
    async def handle_store_error(
        request: Request, exc: ArticleStoreError
    ) -> JSONResponse:
        log.error(
            "Falha no armazenamento em %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": str(exc)})


def include_routes(app: FastAPI, container: NewsContainer, *, prefix: str = "") -> None:
    """Registra as rotas REST e de tempo real na aplicação informada."""

    router = APIRouter(prefix=prefix, tags=["Notícias"])
    error_responses = {500: {"model": ErrorResponse}}

    @router.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def root() -> str:
        return ROOT_MESSAGE

    @router.get("/health")
    def health() -> dict[str, object]:
        """Indica que o processo está ativo, com clientes e eventos difundidos."""

        return {
            "status": "ok",
            "clients": container.broadcaster.client_count,
            "broadcasts": container.broadcaster.messages_broadcast,
        }

    @router.get(
        "/news", response_model=list[ArticleResponse], responses=error_responses
    )
    def list_news() -> list[ArticleResponse]:
        """Lista todas as notícias, da mais recente para a mais antiga."""

        articles = container.query_service.list_all()
        return [ArticleResponse.from_domain(article) for article in articles]

    @router.post(
        "/news",
        status_code=201,
        response_model=ArticleResponse,
        responses=error_responses,
    )
    async def create_news(payload: ArticlePayload) -> ArticleResponse:
        """Cria uma notícia e notifica todos os clientes conectados."""

        article = await container.mutation_service.create(payload.to_domain())
        return ArticleResponse.from_domain(article)

    @router.get(
        "/news/trending",
        response_model=list[ArticleResponse],
        responses=error_responses,
    )
    def list_trending_news() -> list[ArticleResponse]:
        """Lista as cinco notícias com mais visualizações."""

        articles = container.query_service.list_trending()
        return [ArticleResponse.from_domain(article) for article in articles]

    @router.post(
        "/news/{article_id}/like",
        response_model=ArticleResponse,
        responses={404: {"model": ErrorResponse}, **error_responses},
    )
    async def like_news(article_id: str) -> ArticleResponse:
        """Soma uma curtida à notícia e notifica todos os clientes conectados."""

        article = await container.mutation_service.like(article_id)
        return ArticleResponse.from_domain(article)

    app.include_router(router)
    app.include_router(
        create_realtime_router(container.broadcaster, container.mutation_service),
        prefix=prefix,
    )


def create_app(container: NewsContainer | None = None) -> FastAPI:
    """Instancia a aplicação; sem ``MONGO_URI`` a inicialização falha."""

    container = container or build_news_container()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        container.startup()
        log.info("Pulso News API iniciada")
        try:
            yield
        finally:
            await container.shutdown()
            log.info("Pulso News API encerrada")

    app = FastAPI(
        title="Pulso News API",
        version="1.0.0",
        description="Notícias com atualização em tempo real para clientes conectados.",
        lifespan=lifespan,
    )
    app.state.container = container
    configure_cors(app)
    register_error_handlers(app)
    include_routes(app, container)
    return app


def run() -> None:
    """Executa a API de notícias utilizando o Uvicorn."""

    load_dotenv()
    configure_logging(get_log_level())
    uvicorn.run(
        "pulso.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
    )


__all__ = [
    "configure_cors",
    "create_app",
    "include_routes",
    "register_error_handlers",
    "run",
]
