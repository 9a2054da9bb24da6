# eventboard/main.py
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from eventboard.config import settings
from eventboard.core.db import init_db, close_db
from eventboard.core.security import build_token_manager

from eventboard.api.errors import validation_exception_handler
from eventboard.api.routers import events, groups, users

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# Signing secret is read once here; a missing SECRET_KEY stops the process
app.state.tokens = build_token_manager(settings.secret_key)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request validation failures are 400s with a field -> message mapping
app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.generate_schemas)
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(users.router, prefix="/api")
app.include_router(groups.router, prefix="/api")
app.include_router(events.router, prefix="/api")


@app.get("/healthz")
def healthz():
    return {"ok": True}


if __name__ == "__main__":
    uvicorn.run("eventboard.main:app", host=settings.host, port=settings.port)
