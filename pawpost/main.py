import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from pawpost.api.routers import auth, facts, frontend, posts
from pawpost.core.config import Settings
from pawpost.core.database import build_engine, build_session_factory, init_db
from pawpost.core.errors import PawPostError
from pawpost.core.security import configure_hasher

logger = logging.getLogger("pawpost.app")

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    try:
        init_db(engine)
    except Exception:
        logger.exception("Database connection error")
        raise
    yield
    engine.dispose()
    logger.info("Connection pool closed")


def _field_names(errors) -> str:
    names = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        if name not in names:
            names.append(name)
    return ", ".join(names)


def register_error_handlers(app: FastAPI):
    @app.exception_handler(PawPostError)
    async def pawpost_error_handler(request: Request, exc: PawPostError):
        operation = f"{request.method} {request.url.path}"
        if exc.status_code >= 500:
            logger.error("%s failed: %s (cause: %r)", operation, exc, exc.__cause__,
                         exc_info=exc)
        else:
            logger.warning("%s rejected with %s: %s", operation, exc.status_code, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        fields = _field_names(exc.errors())
        logger.warning("%s %s invalid body: %s", request.method, request.url.path, fields)
        return JSONResponse(status_code=400,
                            content={"error": f"Missing or invalid fields: {fields}"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail},
                            headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings) -> FastAPI:
    configure_hasher(settings.bcrypt_rounds)

    app = FastAPI(title="PawPost", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url, settings.pg_sslmode)
    app.state.session_local = build_session_factory(app.state.engine)

    # Rate limiting (fixed window, every route)
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        storage_uri=settings.rate_limit_storage,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(facts.router)
    app.include_router(auth.router)
    app.include_router(posts.router)
    # must stay last
    app.include_router(frontend.router)
    return app
