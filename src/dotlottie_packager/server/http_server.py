"""HTTP server for upload-and-package dotLottie requests."""

from __future__ import annotations

import argparse
import logging
import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from dotlottie_packager.server.core import (
    UploadedDocument,
    package_uploaded_documents,
    parse_colors,
)

logger = logging.getLogger(__name__)

try:
    import fastapi
    from fastapi import responses
    from fastapi.concurrency import run_in_threadpool
except ModuleNotFoundError:  # pragma: no cover
    fastapi = None
    responses = None
    run_in_threadpool = None

try:
    import uvicorn
except ModuleNotFoundError:  # pragma: no cover
    uvicorn = None

if TYPE_CHECKING:
    from fastapi import FastAPI, UploadFile


def _require_http_runtime() -> None:
    """Ensure HTTP server runtime dependencies are available."""
    if fastapi is None or responses is None:
        raise RuntimeError(
            "fastapi is required to run dotlottie-http. Install with extra: .[server]"
        )


class HealthResponse(BaseModel):
    """Health response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


class ReadyResponse(BaseModel):
    """Readiness response payload."""

    model_config = ConfigDict(extra="forbid")

    status: str


async def _read_upload(upload: UploadFile | None, field: str) -> UploadedDocument | None:
    if upload is None:
        return None
    payload = await upload.read()
    if not payload:
        raise ValueError(f"uploaded {field} document is empty")
    return UploadedDocument(filename=upload.filename or f"{field}.json", data=payload)


def create_app() -> FastAPI:
    """Create dotLottie packaging HTTP application."""
    _require_http_runtime()
    from dotlottie_packager import __version__

    app = fastapi.FastAPI(
        title="dotLottie Packager",
        version=__version__,
        description="Upload Lottie animations and download a packaged .lottie container.",
    )
    animation_param = fastapi.File(...)
    light_param = fastapi.File(default=None)
    dark_param = fastapi.File(default=None)
    custom_param = fastapi.File(default=None)
    loop_param = fastapi.Form(default=True)
    theme_color_param = fastapi.Form(default="#ffffff")
    colors_param = fastapi.Form(default=None)

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/readyz", response_model=ReadyResponse)
    async def readyz() -> ReadyResponse:
        return ReadyResponse(status="ready")

    @app.post("/v1/dotlottie")
    async def create_container(
        animation: fastapi.UploadFile = animation_param,
        light: fastapi.UploadFile | None = light_param,
        dark: fastapi.UploadFile | None = dark_param,
        custom: fastapi.UploadFile | None = custom_param,
        loop: bool = loop_param,
        theme_color: str = theme_color_param,
        colors: str | None = colors_param,
    ) -> responses.Response:
        """Package uploaded animation documents and return the container bytes."""
        try:
            primary = await _read_upload(animation, "animation")
            variants = {}
            for theme, upload in (("light", light), ("dark", dark), ("custom", custom)):
                document = await _read_upload(upload, theme)
                if document is not None:
                    variants[theme] = document
            outcome = await run_in_threadpool(
                package_uploaded_documents,
                primary,
                variants,
                loop=loop,
                theme_color=theme_color,
                colors=parse_colors(colors),
            )
        except ValueError as exc:
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_400_BAD_REQUEST,
                detail=str(exc),
            ) from exc
        except Exception as exc:  # pragma: no cover
            logger.exception("unexpected error during dotLottie packaging")
            raise fastapi.HTTPException(
                status_code=fastapi.status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="internal server error",
            ) from exc

        headers = {
            "X-Output-SHA256": outcome.output_sha256,
            "X-Output-Filename": outcome.output_filename,
            "Content-Disposition": f'attachment; filename="{outcome.output_filename}"',
        }
        return responses.Response(
            content=outcome.output_bytes,
            media_type="application/zip",
            headers=headers,
        )

    return app


if TYPE_CHECKING:
    app: FastAPI | None

if fastapi is not None:
    app = create_app()
else:  # pragma: no cover
    app = None


def main() -> None:
    """Run dotLottie packaging HTTP entrypoint."""
    _require_http_runtime()
    if uvicorn is None:
        raise RuntimeError("uvicorn is required to run dotlottie-http")
    parser = argparse.ArgumentParser(description="dotLottie packaging HTTP server.")
    parser.add_argument(
        "--host",
        default=os.getenv("DOTLOTTIE_HTTP_HOST", "0.0.0.0"),
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("DOTLOTTIE_HTTP_PORT", "8090")),
    )
    args = parser.parse_args()
    uvicorn.run(
        "dotlottie_packager.server.http_server:app",
        host=args.host,
        port=args.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
