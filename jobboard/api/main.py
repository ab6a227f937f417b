from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from jobboard.api.endpoints import auth, companies, health, jobs, users
from jobboard.api.endpoints import metrics_export
from jobboard.api.middleware.auth import AuthMiddleware
from jobboard.api.middleware.error_shaping import (
    SafeErrorMiddleware,
    jobboard_error_handler,
    validation_error_handler,
)
from jobboard.api.middleware.request_context import RequestContextMiddleware
from jobboard.core.auth.passwords import PasswordHasher
from jobboard.core.auth.tokens import JwtConfig, TokenService
from jobboard.core.config import Settings
from jobboard.core.db import Database
from jobboard.core.errors import JobboardError
from jobboard.core.models import CompanyStore, JobStore, UserStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    db = Database(settings.database_path)
    tokens = TokenService(JwtConfig.from_settings(settings))
    hasher = PasswordHasher(work_factor=settings.bcrypt_work_factor)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db.init_schema()
        yield

    app = FastAPI(
        title="Jobboard API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db = db
    app.state.tokens = tokens
    app.state.companies = CompanyStore(db=db)
    app.state.jobs = JobStore(db=db)
    app.state.users = UserStore(db=db, hasher=hasher)

    # ------------------------------------------------------------
    # Middleware stack (ORDER MATTERS)
    # Starlette reverses add_middleware order: the LAST call is the OUTERMOST wrapper.
    # Runtime order, outermost first:
    #   SafeErrorMiddleware, CORSMiddleware, RequestContext, Auth, handler
    # ------------------------------------------------------------
    app.add_middleware(AuthMiddleware, tokens=tokens)
    app.add_middleware(RequestContextMiddleware)

    # CORS outside Auth so OPTIONS preflight never needs a token
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # SafeErrorMiddleware LAST = outermost (catches all exceptions from inner middleware)
    app.add_middleware(SafeErrorMiddleware)

    app.add_exception_handler(JobboardError, jobboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router)
    app.include_router(metrics_export.router)
    app.include_router(auth.router)
    app.include_router(companies.router)
    app.include_router(jobs.router)
    app.include_router(users.router)

    return app


app = create_app()
