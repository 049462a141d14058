from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.network import router as network_router
from src.adapters.api.controllers.routes import router as routes_router
from src.adapters.config import AppConfig
from src.domain.exceptions import CatalogueError

app = FastAPI(title="Transit Catalogue")
app.include_router(network_router)
app.include_router(routes_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON, including network loading failures."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = AppConfig.from_env().reveal_errors

    if reveal or isinstance(exc, (CatalogueError, FileNotFoundError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
