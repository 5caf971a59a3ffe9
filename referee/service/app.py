"""FastAPI application entrypoint for referee service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import ConfigError
from ..orchestrator import Orchestrator, ScanReport
from ..scanner import ScanAbortedError
from ..storyboards import DocumentParseError


class ScanRequest(BaseModel):
    path: str
    config_path: Optional[str] = None
    error_on_missing_ids: Optional[bool] = None


class ControllerPayload(BaseModel):
    identifier: Optional[str] = None
    class_: Optional[str] = Field(None, alias="class")


class StoryboardPayload(BaseModel):
    name: str
    path: str
    table_cells: List[str]
    collection_cells: List[str]
    view_controllers: List[ControllerPayload]
    segues: List[str]


class DiagnosticPayload(BaseModel):
    severity: str
    message: str
    storyboard: str


class ScanResponse(BaseModel):
    project_root: str
    storyboards: List[StoryboardPayload]
    diagnostics: List[DiagnosticPayload]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def _to_response(report: ScanReport) -> ScanResponse:
    storyboards = [
        StoryboardPayload(
            name=group.storyboard_name,
            path=group.storyboard.path,
            table_cells=list(group.table_cells),
            collection_cells=list(group.collection_cells),
            view_controllers=[
                ControllerPayload.model_validate(item.to_dict())
                for item in group.view_controllers
            ],
            segues=list(group.segues),
        )
        for group in report.groups
    ]
    diagnostics = [DiagnosticPayload(**item.to_dict()) for item in report.diagnostics]
    return ScanResponse(
        project_root=str(report.project_root),
        storyboards=storyboards,
        diagnostics=diagnostics,
    )


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing referee scans."""

    app = FastAPI(title="Referee Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # Lazy-instantiate per request to keep state predictable.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/scan", response_model=ScanResponse)
    async def scan_project(
        payload: ScanRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> ScanResponse:
        def _run_scan() -> ScanReport:
            return orchestrator.run_scan(
                payload.path,
                config_path=payload.config_path,
                error_on_missing_ids=payload.error_on_missing_ids,
            )

        loop = asyncio.get_running_loop()
        report = await loop.run_in_executor(None, _run_scan)
        return _to_response(report)

    @app.exception_handler(ScanAbortedError)
    async def scan_aborted_handler(_: Any, exc: ScanAbortedError) -> JSONResponse:
        content: Dict[str, Any] = {
            "detail": str(exc),
            "diagnostic": exc.diagnostic.to_dict(),
        }
        return JSONResponse(status_code=422, content=content)

    @app.exception_handler(DocumentParseError)
    async def parse_error_handler(_: Any, exc: DocumentParseError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
