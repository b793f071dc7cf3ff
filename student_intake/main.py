# student_intake/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from student_intake.core.config import Settings, settings
from student_intake.core.errors import IntakeError
from student_intake.core.logging_config import configure_logging
from student_intake.db.session import build_engine, build_session_factory
from student_intake.db.base import Base
from student_intake.services.storage import UploadStorage

# Import models so SQLAlchemy knows about them (for create_all)
from student_intake.models.student import Student  # noqa: F401

# Routers
from student_intake.api.routes import router as api_router
from student_intake.api.student_routes import router as student_router

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    app = FastAPI(title=app_settings.APP_NAME)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    # CORS
    origins = [o.strip() for o in app_settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Ensure tables exist (uses the SQLite file from .env by default)
    engine = build_engine(app_settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)

    # Upload directory is provisioned once here and handed to routes via app.state
    storage = UploadStorage(app_settings.UPLOAD_DIR, app_settings.UPLOAD_URL_PREFIX)
    storage.provision()

    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.storage = storage

    @app.exception_handler(IntakeError)
    async def intake_error_handler(request: Request, exc: IntakeError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    # API routes
    app.include_router(api_router)       # /health
    app.include_router(student_router)   # /api/submit, /api/submissions

    # Stored resumes: /uploads/<generated-name>.<ext>
    app.mount(storage.url_prefix, StaticFiles(directory=storage.root), name="uploads")

    logger.info("%s started (env=%s)", app_settings.APP_NAME, app_settings.APP_ENV)
    return app
