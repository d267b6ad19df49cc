from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from sqlalchemy.orm import sessionmaker
from app.config import Settings, settings as default_settings
from app.database import Base, build_engine, engine, get_db, session_dependency
from app.models import department, employee  # noqa: F401  (register tables)
from app.routers import departments, employees
from app.utils.errors import setup_error_handling

import time
import logging
from fastapi import Request
from app.logging_config import setup_logging


setup_logging(sql_echo=default_settings.SQL_ECHO)
logger = logging.getLogger("app")


# create tables if they don't exist
Base.metadata.create_all(bind=engine)


def _bind_database(app: FastAPI, settings: Settings):
    """Point get_db at settings.DATABASE_URL when it is not the process-wide store."""
    if settings.DATABASE_URL == default_settings.DATABASE_URL:
        return

    app_engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    Base.metadata.create_all(bind=app_engine)
    app_sessions = sessionmaker(autocommit=False, autoflush=False, bind=app_engine)
    app.dependency_overrides[get_db] = session_dependency(app_sessions)
    logger.info("App bound to its own store (%s)", app_engine.url)


def create_app(settings: Settings = default_settings) -> FastAPI:
    docs = settings.is_development
    app = FastAPI(
        title="Employee Management System API",
        version="1.0.0",
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.time()
        try:
            response = await call_next(request)
            ms = int((time.time() - start) * 1000)
            logger.info("%s %s -> %s (%dms)", request.method, request.url.path, response.status_code, ms)
            return response
        except Exception:
            ms = int((time.time() - start) * 1000)
            logger.exception("Unhandled error %s %s (%dms)", request.method, request.url.path, ms)
            raise

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.FORCE_HTTPS:
        app.add_middleware(HTTPSRedirectMiddleware)

    setup_error_handling(app)
    _bind_database(app, settings)

    # Routers
    app.include_router(departments.router)
    app.include_router(employees.router)

    @app.get("/")
    def root():
        return {"message": "Employee management backend is running!"}

    logger.info("App created (environment=%s, docs=%s)", settings.ENVIRONMENT, docs)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
