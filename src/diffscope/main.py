# src/diffscope/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
import uvicorn
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from diffscope import __version__
from diffscope.config import Settings
from diffscope.diff.service import DiffService
from diffscope.errors import DiffError, FileNotInDiffError
from diffscope.models.diff import DiffKind, DiffResult, FileChange
from diffscope.platforms.git import LocalGitClient


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger.info(f"diffscope starting for repository {settings.repo_path}")
    yield
    logger.info("diffscope shutting down...")


app = FastAPI(title="diffscope", lifespan=lifespan)


class StatusResponse(BaseModel):
    files: list[str]


class FileContentResponse(BaseModel):
    path: str
    content: str


def get_service(settings: Settings) -> DiffService:
    backend = LocalGitClient(
        repo_path=settings.repo_path,
        git_binary=settings.git_binary,
        timeout=settings.git_timeout,
    )
    return DiffService(backend=backend, full_context_lines=settings.full_context_lines)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.get("/api/diff", response_model=DiffResult)
async def get_diff(
    kind: DiffKind = Query(default=DiffKind.ALL, alias="type"),
    context: int | None = Query(default=None),
):
    settings = get_settings()
    service = get_service(settings)
    context_lines = settings.default_context_lines if context is None else context

    try:
        return await service.get_diff(kind, context_lines)
    except DiffError as e:
        logger.exception(f"Diff failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.get("/api/diff/file", response_model=FileChange)
async def get_file_diff(
    path: str,
    kind: DiffKind = Query(default=DiffKind.ALL, alias="type"),
    context: int | None = Query(default=None),
    full_context: bool = False,
):
    settings = get_settings()
    service = get_service(settings)

    try:
        if full_context:
            return await service.get_file_diff_with_full_context(path, kind)
        context_lines = settings.default_context_lines if context is None else context
        return await service.get_file_diff(path, kind, context_lines)
    except FileNotInDiffError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DiffError as e:
        logger.exception(f"File diff failed for {path}: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.get("/api/status", response_model=StatusResponse)
async def get_status():
    service = get_service(get_settings())

    try:
        return StatusResponse(files=await service.get_status())
    except DiffError as e:
        logger.exception(f"Status failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))


@app.get("/api/file", response_model=FileContentResponse)
async def get_file_content(path: str):
    service = get_service(get_settings())

    try:
        return FileContentResponse(path=path, content=await service.get_file_content(path))
    except DiffError as e:
        logger.exception(f"File read failed for {path}: {e}")
        raise HTTPException(status_code=502, detail=str(e))


def run():
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
