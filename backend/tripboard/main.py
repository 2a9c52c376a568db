# backend/tripboard/main.py

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tripboard.api.routes_itinerary import router as itinerary_router
from tripboard.api.routes_suggestions import router as suggestions_router
from tripboard.core.config_loader import Settings
from tripboard.core.errors import TripboardError, ValidationFailed
from tripboard.core.logger import configure_logging, get_logger
from tripboard.db.sqlite_store import TripStore


logger = get_logger("main")


# -------------------------------------------------------------
# ERROR HANDLERS
# -------------------------------------------------------------
async def _tripboard_error(request: Request, exc: TripboardError):
    body = {"detail": exc.message}
    if isinstance(exc, ValidationFailed) and exc.allowed:
        body["allowed"] = exc.allowed
    return JSONResponse(status_code=exc.status_code, content=body)


async def _request_validation_error(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg"))
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request: " + "; ".join(problems)},
    )


async def _unexpected_error(request: Request, exc: Exception):
    logger.exception("Error in %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Failed to process request due to a server error."},
    )


# -------------------------------------------------------------
# APP FACTORY
# -------------------------------------------------------------
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_dir)

    for name in settings.missing_secrets():
        logger.warning("%s is not set; that role can never be satisfied", name)

    store = TripStore(settings.DB_PATH)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        store.close()

    app = FastAPI(
        title="Tripboard",
        description="Shared trip itinerary and suggestion inbox",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # ---------------------------------------------------------
    # CORS
    # ---------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TripboardError, _tripboard_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unexpected_error)

    # ---------------------------------------------------------
    # ROUTES
    # ---------------------------------------------------------
    app.include_router(itinerary_router)
    app.include_router(suggestions_router)

    @app.get("/")
    def root():
        return {
            "status": "ok",
            "message": "Tripboard backend is running",
            "env": settings.environment,
        }

    logger.info("Tripboard started (env=%s, db=%s)", settings.environment, settings.DB_PATH)
    return app


# -------------------------------------------------------------
# RUN LOCAL
# -------------------------------------------------------------
def run():
    uvicorn.run(
        "tripboard.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    run()
