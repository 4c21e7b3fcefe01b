from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.middleware import SessionCookieMiddleware
from .api.routers import auth, issues, me
from .shared.config import get_settings
from .shared.logging_setup import configure_logging


settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="Issue Tracker API")
app.add_middleware(SessionCookieMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.app_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(me.router)
app.include_router(issues.router)


@app.get("/health")
def health():
    return {"status": "ok"}
