"""FastAPI entry point for the POI generator function.

Routes:
- POST /generatePOIs  callable-function protocol: {"data": {...}} -> {"result": [...]}
- POST /v1/pois       plain JSON: {location, tags} -> [{title, description}]
- GET  /health

The container (settings, model client, generator) is built once in the
lifespan hook before any request is served.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from poi_generator.errors import POIGeneratorError
from poi_generator.observability.tracing import log_event, new_trace_id
from poi_generator.runtime.generator import POIGenerator
from poi_generator.schemas import (
    CallableError,
    CallableErrorResponse,
    CallableRequest,
    CallableResult,
    GeneratePOIsIn,
    POIRecord,
)
from poi_generator.server.core.container import Container, get_container

UPSTREAM_ERRORS = (httpx.HTTPError, POIGeneratorError)

tags_metadata = [
    {
        "name": "POIs",
        "description": "Tourist attraction suggestions generated by the language model"
    },
    {
        "name": "Health",
        "description": "Liveness probe"
    }
]


def get_generator(request: Request) -> POIGenerator:
    container: Container = request.app.state.container
    return container.generator


def _callable_error(status_code: int, status: str, message: str, details: Any = None) -> JSONResponse:
    body = CallableErrorResponse(error=CallableError(status=status, message=message, details=details))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(container_factory: Callable[[], Container] = get_container) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container = container_factory()
        yield

    app = FastAPI(
        title='POI Generator',
        version='1.0.0',
        description='Generates tourist attraction suggestions for a location',
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    @app.get('/health', tags=['Health'])
    async def health() -> dict[str, bool]:
        return {'ok': True}

    @app.post('/generatePOIs', tags=['POIs'], response_model=CallableResult)
    async def generate_pois_callable(
        request: Request,
        generator: POIGenerator = Depends(get_generator),
    ) -> Any:
        trace_id = new_trace_id()
        try:
            call = CallableRequest.model_validate(await request.json())
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False)
            log_event('pois.invalid_argument', trace_id=trace_id, errors=errors)
            return _callable_error(
                400, 'INVALID_ARGUMENT', 'Request must contain data.location and data.tags.', details=errors
            )
        except ValueError as exc:
            log_event('pois.invalid_argument', trace_id=trace_id, error=str(exc))
            return _callable_error(400, 'INVALID_ARGUMENT', 'Request body must be a JSON object.')

        try:
            records = await generator.generate_pois(
                call.data.location, call.data.tags, metadata={'trace_id': trace_id}
            )
        except UPSTREAM_ERRORS as exc:
            log_event('pois.failed', trace_id=trace_id, error_type=type(exc).__name__, error=str(exc))
            return _callable_error(500, 'INTERNAL', 'INTERNAL')
        return CallableResult(result=records)

    @app.post('/v1/pois', tags=['POIs'], response_model=list[POIRecord])
    async def generate_pois(
        payload: GeneratePOIsIn,
        generator: POIGenerator = Depends(get_generator),
    ) -> list[POIRecord]:
        trace_id = new_trace_id()
        try:
            return await generator.generate_pois(payload.location, payload.tags, metadata={'trace_id': trace_id})
        except UPSTREAM_ERRORS as exc:
            log_event('pois.failed', trace_id=trace_id, error_type=type(exc).__name__, error=str(exc))
            raise HTTPException(status_code=502, detail='Completion request failed') from exc

    return app
