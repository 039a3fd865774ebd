"""FastAPI dependencies for the web shell."""
from fastapi import Request

from pantrypal.logic.session import Session


def get_session(request: Request) -> Session:
    """The process-wide Session attached to the app by create_app()."""
    return request.app.state.session
