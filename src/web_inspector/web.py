"""HTTP API for website analysis: ``POST /api/analyze`` and ``GET /api/sources``."""

from typing import Any, Dict, List, Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from . import __version__
from .auditor import analyze_website
from .config import Settings
from .errors import InvalidInputError
from .rules import RULE_SOURCES, RULES

log = structlog.get_logger(__name__)


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/analyze``."""

    model_config = ConfigDict(populate_by_name=True)

    site_url: Optional[str] = Field(default=None, alias="siteUrl")
    source_filter: Optional[str] = Field(default="all", alias="sourceFilter")


def _error(status_code: int, **body: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body)


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.Client] = None,
) -> FastAPI:
    """Build the API application.

    ``settings`` and ``http_client`` are passed through to every analysis;
    tests use them to inject a mock transport.
    """
    app = FastAPI(title="Web Inspector API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, error="Invalid request body", message=str(exc.errors()))

    @app.post("/api/analyze")
    def analyze(body: Optional[AnalyzeRequest] = None) -> Any:
        # Sync handler: FastAPI runs it in the threadpool.
        body = body or AnalyzeRequest()
        try:
            result = analyze_website(
                body.site_url,
                body.source_filter or "all",
                settings=settings,
                client=http_client,
            )
        except InvalidInputError as e:
            return _error(400, error=str(e))
        except Exception as e:
            log.exception("api.analyze_failed", site_url=body.site_url)
            return _error(500, error="Failed to analyze website", message=str(e))
        return result.to_dict()

    @app.get("/api/sources")
    def sources() -> List[Dict[str, Any]]:
        return [
            {
                "id": source.id,
                "name": source.name,
                "organization": source.organization,
                "description": source.description,
                "url": source.url,
                "ruleCount": len(source.select(RULES)),
            }
            for source in RULE_SOURCES
        ]

    return app


app = create_app()
