from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.schedules import router as schedules_router
from src.adapters.settings import _env_bool
from src.domain.exceptions import TrimmingError

# Errors whose message is safe to return to API clients.
_REPORTABLE = (TrimmingError, FileNotFoundError, RuntimeError, ValueError)

app = FastAPI(title="pt-route-trim")
app.include_router(schedules_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report failures the controllers did not map as JSON 500s.

    Env vars:
      - TRIM_REVEAL_ERRORS: return every exception message, not only trimming
        and input errors
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    if _env_bool("TRIM_REVEAL_ERRORS") or isinstance(exc, _REPORTABLE):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
