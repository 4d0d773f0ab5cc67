"""FastAPI application entrypoint for cssdts service mode."""

from __future__ import annotations

from typing import Any, Callable, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import DEFAULT_MODE, LoaderOptions
from ..errors import (
    ConfigurationError,
    CssDtsError,
    DeclarationMissingError,
    DeclarationOutdatedError,
)
from ..reconciler import Reconciler


class ReconcileRequest(BaseModel):
    content: str
    resource_path: str
    mode: str = DEFAULT_MODE
    named_exports: bool = False


class ReconcileResponse(BaseModel):
    status: str
    declaration_path: str
    written: bool
    keys: List[str]
    content: str


class HealthResponse(BaseModel):
    status: str


def _default_reconciler() -> Reconciler:
    return Reconciler()


def create_app(
    reconciler_factory: Callable[[], Reconciler] = _default_reconciler,
) -> FastAPI:
    """Create the FastAPI application exposing declaration reconciliation."""

    app = FastAPI(title="cssdts Service", version="1.0.0")

    async def get_reconciler() -> Reconciler:
        return reconciler_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/reconcile", response_model=ReconcileResponse)
    def reconcile(
        payload: ReconcileRequest,
        reconciler: Reconciler = Depends(get_reconciler),
    ) -> ReconcileResponse:
        outcome = reconciler.reconcile(
            payload.content,
            payload.resource_path,
            options=LoaderOptions(mode=payload.mode, named_exports=payload.named_exports),
        )
        return ReconcileResponse(
            status="ok",
            declaration_path=str(outcome.declaration_path),
            written=outcome.written,
            keys=outcome.keys,
            content=outcome.content,
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(_: Any, exc: ConfigurationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(DeclarationMissingError)
    async def missing_handler(_: Any, exc: DeclarationMissingError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc), "declaration_path": str(exc.path)},
        )

    @app.exception_handler(DeclarationOutdatedError)
    async def outdated_handler(_: Any, exc: DeclarationOutdatedError) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "detail": str(exc),
                "declaration_path": str(exc.path),
                "diff": exc.diff,
            },
        )

    @app.exception_handler(CssDtsError)
    async def cssdts_error_handler(
        _: Any, exc: CssDtsError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)


__all__ = ["create_app", "run_service"]
