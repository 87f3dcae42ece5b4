"""FastAPI web server for subtrack."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from subtrack.config import Settings, get_settings
from subtrack.db.database import Database
from subtrack.db.errors import StoreError
from subtrack.db.subscription_repo import SubscriptionRepository
from subtrack.db.user_repo import UserRepository
from subtrack.errors import NotFoundError, SubtrackError, ValidationError
from subtrack.services.subscription_service import Clock, SubscriptionService, utc_now
from subtrack.services.user_service import UserService

logger = logging.getLogger(__name__)


# Request Models
class UserCreate(BaseModel):
    username: str = ""


class SubscriptionCreate(BaseModel):
    user_id: int
    plan_type: Optional[str] = None


def create_app(settings: Optional[Settings] = None, clock: Clock = utc_now) -> FastAPI:
    """Build the application; each call gets its own in-memory Database."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Wire the store, repositories and services before serving."""
        db = Database()
        user_svc = UserService(UserRepository(db))
        app.state.db = db
        app.state.users = user_svc
        app.state.subscriptions = SubscriptionService(
            SubscriptionRepository(db), user_service=user_svc, clock=clock
        )
        logger.info(f"Server started - tables: {', '.join(db.tables())}")
        yield
        logger.info("Server shutting down")

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Users and subscriptions backed by an in-memory table store",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)
    _register_routes(app, settings)
    return app


# Error mapping
def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": f"invalid request: {exc.errors()}"})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(SubtrackError)
    async def domain_error_handler(request: Request, exc: SubtrackError):
        logger.error(f"Unhandled domain error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(f"Store error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})


# API Routes
def _register_routes(app: FastAPI, settings: Settings) -> None:
    @app.get("/status")
    async def get_status(request: Request):
        """Get system status."""
        return {
            "status": "ok",
            "version": settings.APP_VERSION,
            "tables": request.app.state.db.tables(),
        }

    # -- Users -----------------------------------------------------------------

    @app.post("/users")
    async def create_user(body: UserCreate, request: Request):
        """Create a new user."""
        user = request.app.state.users.create(body.username)
        return user.to_dict()

    @app.get("/users")
    async def list_users(request: Request, username: Optional[str] = None):
        """List all users, optionally filtered by exact username."""
        users_svc: UserService = request.app.state.users
        users = users_svc.get_by_username(username) if username else users_svc.find_all()
        return [u.to_dict() for u in users]

    @app.get("/users/{user_id}")
    async def get_user(user_id: int, request: Request):
        return request.app.state.users.get_by_id(user_id).to_dict()

    # -- Subscriptions ---------------------------------------------------------

    @app.post("/subscriptions")
    async def create_subscription(body: SubscriptionCreate, request: Request):
        """Subscribe an existing user to a plan."""
        if not body.plan_type:
            raise HTTPException(status_code=400, detail="plan_type is required")
        try:
            subscription = request.app.state.subscriptions.create(body.user_id, body.plan_type)
        except NotFoundError as e:
            raise HTTPException(status_code=400, detail=f"user not found: {e}")
        return subscription.to_dict()

    @app.get("/subscriptions")
    async def list_subscriptions(request: Request):
        return [s.to_dict() for s in request.app.state.subscriptions.find_all()]

    @app.get("/subscriptions/users/{user_id}")
    async def list_user_subscriptions(
        user_id: int, request: Request, plan_type: Optional[str] = None
    ):
        """List a user's subscriptions, oldest first."""
        subs = request.app.state.subscriptions.get_by_user_id(user_id, plan_type)
        return [s.to_dict() for s in subs]

    @app.get("/subscriptions/users/{user_id}/active")
    async def get_active_subscription(
        user_id: int, request: Request, plan_type: Optional[str] = None
    ):
        """Return the user's current subscription, 404 if none is active."""
        return request.app.state.subscriptions.get_active_for_user(user_id, plan_type).to_dict()

    @app.get("/subscriptions/{subscription_id}")
    async def get_subscription(subscription_id: int, request: Request):
        return request.app.state.subscriptions.get_by_id(subscription_id).to_dict()


app = create_app()


if __name__ == "__main__":
    import uvicorn
    _settings = get_settings()
    uvicorn.run("server.app:app", host=_settings.API_HOST, port=_settings.API_PORT)
