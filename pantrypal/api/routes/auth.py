"""Login, Register and Home views."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from pantrypal.api.dependencies import get_session
from pantrypal.domain.errors import DuplicateUsernameError, InvalidCredentialsError, InvalidFieldError
from pantrypal.logic.session import Session
from pantrypal.utilities.validators import CredentialsInput

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(credentials: CredentialsInput, session: Session = Depends(get_session)):
    try:
        user = session.register(credentials.username, credentials.password)
    except DuplicateUsernameError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists.")
    except InvalidFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": True, "user": user.to_dict()}


@router.post("/login")
def login(credentials: CredentialsInput, session: Session = Depends(get_session)):
    try:
        user = session.login(credentials.username, credentials.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return {"success": True, "user": user.to_dict()}


@router.post("/logout")
def logout(session: Session = Depends(get_session)):
    session.logout()
    return {"success": True}


@router.get("/home")
def home(session: Session = Depends(get_session)):
    """Summary for the home view: who is signed in and how much is in each list."""
    user = session.require_user()
    pantry = session.list_pantry()
    expired = [item for item in pantry if item.is_expired()]
    return {
        "user": user.to_dict(),
        "pantry_count": len(pantry),
        "expired_count": len(expired),
        "shopping_count": len(session.list_shopping_items()),
        "notification_count": len(session.list_notifications()),
    }
