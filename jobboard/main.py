# jobboard/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard import config
from jobboard.database import Database
from jobboard.errors import JobBoardError

# -----------
# Logging
# -----------
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("jobboard")

from jobboard.routes import auth as auth_routes  # noqa: E402
from jobboard.routes import jobs  # noqa: E402

APP_NAME = "JobBoard API"
APP_VERSION = "1.0.0"


def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def _log_routes(app: FastAPI) -> None:
    log.info("=== ROUTES ===")
    for r in app.routes:
        if isinstance(r, APIRoute):
            methods = ",".join(sorted(r.methods))
            log.info("%-10s %-25s -> %s.%s", methods, r.path, r.endpoint.__module__, r.endpoint.__name__)


def create_app(database_url: Optional[str] = None, create_tables: Optional[bool] = None) -> FastAPI:
    """
    Build the API around its own Database handle.
    Tables are created on startup in dev (or with AUTO_MIGRATE=true) unless
    `create_tables` says otherwise; the engine is disposed on shutdown.
    """
    db = Database(database_url)
    if create_tables is None:
        create_tables = config.ENV == "dev" or config.AUTO_MIGRATE

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            db.create_all()
        log.info("ENV=%s database=%r", config.ENV, db)
        _log_routes(app)
        yield
        db.dispose()
        log.info("Database handle closed")

    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description="Job board: accounts, bearer tokens and job listings",
        lifespan=lifespan,
    )
    app.state.db = db

    # -----------
    # CORS
    # -----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],                    # includes Authorization, Content-Type, etc.
        expose_headers=["Content-Type", "Authorization"],
        max_age=600,
    )

    @app.middleware("http")
    async def log_auth_header(request: Request, call_next):
        auth_present = bool(request.headers.get("authorization"))
        log.info("REQ %s %s  Auth? %s", request.method, request.url.path, auth_present)
        return await call_next(request)

    # -----------
    # Errors -> {"error": message}
    # -----------
    @app.exception_handler(JobBoardError)
    async def handle_jobboard_error(request: Request, exc: JobBoardError):
        return _error(exc.status_code, exc.message, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        msg = first.get("msg", "Invalid request")
        return _error(400, f"{where}: {msg}" if where else msg)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, "Not found")
        return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal Server Error")

    # -----------
    # Routers
    # -----------
    app.include_router(auth_routes.router)
    app.include_router(jobs.router)

    # -----------
    # Health & root
    # -----------
    @app.get("/health")
    def health(request: Request):
        connected = request.app.state.db.ping()
        return {"server": "Running", "database": "Connected" if connected else "Disconnected"}

    @app.get("/")
    def root():
        return {"name": APP_NAME, "version": APP_VERSION}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jobboard.main:app", host=config.HOST, port=config.PORT)
