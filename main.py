import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from database.db import init_db

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# quiet HTTP client debug logs
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ routers
from routers import analytics, auth, export, subjects


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
    )

    # ✅ CORS (frontend)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ request latency (X-Latency-Ms response header)
    app.add_middleware(TimingMiddleware)

    # ✅ global error handlers (uniform JSON error envelope)
    add_error_handlers(app)

    # ✅ /v1 prefixed routers
    app.include_router(auth.router,      prefix="/v1")
    app.include_router(subjects.router,  prefix="/v1")
    app.include_router(analytics.router, prefix="/v1")
    app.include_router(export.router,    prefix="/v1")

    @app.on_event("startup")
    def _create_tables():
        init_db()

    # ✅ health check
    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "API is running"}

    # ✅ root
    @app.get("/")
    def root():
        return {"message": f"{settings.APP_TITLE} - {settings.APP_DESCRIPTION}"}

    return app


app = create_app()
