import logging
import os
from dotenv import load_dotenv

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

import meetup.database as database
from meetup.errors import EventServiceError, body_error_handler, event_service_error_handler

# ----- Load environment variables -----
load_dotenv()

# ----- Logging -----
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

# ----- Routers -----
from meetup.routes.events import BODY_FAILURES, router as events_router

# ----- FastAPI app -----
app = FastAPI(
    title="Meetup Events",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# ----- CORS (enabled only if ALLOWED_ORIGINS is set) -----
raw_origins = os.getenv("ALLOWED_ORIGINS", "").strip()
if raw_origins:
    allowed_origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-User"],
        max_age=86400,
    )

# ----- Errors: one plain-text "Server Error" per operation -----
app.add_exception_handler(EventServiceError, event_service_error_handler)
app.add_exception_handler(RequestValidationError, body_error_handler(BODY_FAILURES))

app.include_router(events_router)


@app.on_event("startup")
async def on_startup():
    await database.init_models()
    logging.info("Meetup events API started and database tables ensured.")


@app.on_event("shutdown")
async def on_shutdown():
    await database.engine.dispose()


# ----- Health check endpoint -----
@app.get("/health", tags=["meta"])
async def health():
    return {"ok": True}
