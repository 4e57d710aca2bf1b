"""
HarmonyLearn FastAPI Application

Learning platform API: courses, classrooms, mentorship and community.
"""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from harmonylearn.api import (
    auth,
    classrooms,
    courses,
    enrollments,
    health,
    live_sessions,
    memberships,
    mentors,
    mentorship,
    posts,
    requests,
    schedules,
    users,
)
from harmonylearn.api.error_handlers import register_error_handlers
from harmonylearn.api.middleware import register_middleware
from harmonylearn.config import Settings, settings
from harmonylearn.core.database import Database
from harmonylearn.core.observability import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events.

    Startup:
    - Configure logging and report unsafe production settings
    - Connect to the database and verify it answers
    - Create missing tables when DATABASE_AUTO_CREATE is on

    Shutdown:
    - Close database connections
    """
    app_settings: Settings = app.state.settings
    configure_logging(app_settings.LOG_LEVEL)
    logger.info(f"{app_settings.APP_NAME} starting ({app_settings.ENVIRONMENT})")

    for warning in app_settings.production_warnings():
        logger.warning(f"Production configuration: {warning}")

    database = Database.from_settings(app_settings)
    try:
        await database.ping()
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        await database.dispose()
        raise
    logger.info("Database connection verified")

    if app_settings.DATABASE_AUTO_CREATE:
        await database.create_all()
        logger.info("Database tables ensured")

    app.state.database = database
    logger.info(f"{app_settings.APP_NAME} ready on port {app_settings.PORT}")

    yield

    logger.info(f"{app_settings.APP_NAME} shutting down")
    await database.dispose()


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI app instance
    """
    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Learning platform API for courses, classrooms and mentorship",
        version=app_settings.APP_VERSION,
        docs_url="/docs" if not app_settings.is_production else None,
        redoc_url="/redoc" if not app_settings.is_production else None,
        openapi_url="/openapi.json" if not app_settings.is_production else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.started_at = time.monotonic()

    register_middleware(app, app_settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(courses.router, prefix="/api/courses", tags=["Courses"])
    app.include_router(enrollments.router, prefix="/api/enrollments", tags=["Enrollments"])
    app.include_router(classrooms.router, prefix="/api/classrooms", tags=["Classrooms"])
    app.include_router(
        memberships.router, prefix="/api/classroom-memberships", tags=["Memberships"]
    )
    app.include_router(live_sessions.router, prefix="/api/live-sessions", tags=["Live Sessions"])
    app.include_router(mentors.router, prefix="/api/mentors", tags=["Mentors"])
    app.include_router(mentors.profiles_router, prefix="/api/mentor-profiles", tags=["Mentors"])
    app.include_router(posts.router, prefix="/api/posts", tags=["Posts"])
    app.include_router(requests.staff_router, prefix="/api/staff-requests", tags=["Requests"])
    app.include_router(
        requests.master_role_router, prefix="/api/master-role-requests", tags=["Requests"]
    )
    app.include_router(
        requests.resignation_router, prefix="/api/resignation-requests", tags=["Requests"]
    )
    app.include_router(
        mentorship.requests_router, prefix="/api/mentorship-requests", tags=["Mentorship"]
    )
    app.include_router(
        mentorship.sessions_router, prefix="/api/mentorship-sessions", tags=["Mentorship"]
    )
    app.include_router(
        mentorship.conversations_router, prefix="/api/mentor-conversations", tags=["Mentorship"]
    )
    app.include_router(schedules.router, prefix="/api/schedules", tags=["Schedules"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "harmonylearn.main:app",
        host="0.0.0.0",  # nosec B104 - Intentional for containerized deployment
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
