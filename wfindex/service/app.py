"""FastAPI application entrypoint for wfindex service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..inspector import InspectionResult, WorkflowInspector


class WorkflowRequest(BaseModel):
    root: str
    initial_path: str
    language: Optional[str] = None


class IndexedFile(BaseModel):
    role: str
    version: Optional[str] = None
    content: Optional[str] = None


class IndexRequest(WorkflowRequest):
    include_content: bool = False


class IndexResponse(BaseModel):
    language: str
    initial_path: str
    files: Dict[str, IndexedFile]


class ValidateResponse(BaseModel):
    language: str
    initial_path: str
    valid: bool
    messages: Dict[str, str]
    test_parameter_messages: Dict[str, str]
    author: Optional[str] = None
    description: Optional[str] = None


class LanguageInfo(BaseModel):
    name: str
    short_name: str
    long_name: str


class HealthResponse(BaseModel):
    status: str


def _default_inspector() -> WorkflowInspector:
    return WorkflowInspector()


def create_app(
    inspector_factory: Callable[[], WorkflowInspector] = _default_inspector,
) -> FastAPI:
    """Create the FastAPI application exposing wfindex operations."""

    app = FastAPI(title="wfindex service", version="1.0.0")

    async def get_inspector() -> WorkflowInspector:
        # Lazy-instantiate per request to keep state predictable.
        return inspector_factory()

    async def _run(
        inspector: WorkflowInspector, payload: WorkflowRequest
    ) -> InspectionResult:
        def _inspect() -> InspectionResult:
            return inspector.inspect(
                payload.root, payload.initial_path, language=payload.language
            )

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _inspect)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/languages", response_model=List[LanguageInfo])
    async def languages(
        inspector: WorkflowInspector = Depends(get_inspector),
    ) -> List[LanguageInfo]:
        return [
            LanguageInfo(name=name, short_name=language.short_name, long_name=language.long_name)
            for name, language in inspector.languages().items()
        ]

    @app.post("/index", response_model=IndexResponse)
    async def index_workflow(
        payload: IndexRequest,
        inspector: WorkflowInspector = Depends(get_inspector),
    ) -> IndexResponse:
        result = await _run(inspector, payload)
        files = {
            path: IndexedFile(
                role=record.role.value,
                version=record.version,
                content=record.content if payload.include_content else None,
            )
            for path, record in sorted(result.files.items())
        }
        return IndexResponse(
            language=result.language.short_name,
            initial_path=result.initial_path,
            files=files,
        )

    @app.post("/validate", response_model=ValidateResponse)
    async def validate_workflow(
        payload: WorkflowRequest,
        inspector: WorkflowInspector = Depends(get_inspector),
    ) -> ValidateResponse:
        result = await _run(inspector, payload)
        return ValidateResponse(
            language=result.language.short_name,
            initial_path=result.initial_path,
            valid=result.valid,
            messages=dict(result.workflow_validation.messages),
            test_parameter_messages=dict(result.test_parameter_validation.messages),
            author=result.metadata.author,
            description=result.metadata.description,
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        _: Any, exc: ConfigError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "0.0.0.0", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
