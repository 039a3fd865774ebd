from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from typing import Optional
import logging

from pantrypal.domain.errors import NotAuthenticatedError
from pantrypal.logic.session import Session

# Routers
from pantrypal.api.routes import auth, pantry, shopping, notifications

# Logging
logger = logging.getLogger("pantrypal_app")


def create_app(session: Optional[Session] = None) -> FastAPI:
    """Build the web shell around one Session (a fresh one on the real home dir by default)."""
    app = FastAPI(title="PantryPal API")
    app.state.session = session or Session()

    app.include_router(auth.router)
    app.include_router(pantry.router)
    app.include_router(shopping.router)
    app.include_router(notifications.router)

    @app.exception_handler(NotAuthenticatedError)
    async def _not_authenticated(request: Request, exc: NotAuthenticatedError):
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)})

    logger.info("PantryPal data directory: %s", app.state.session.paths.base_dir)
    return app
