"""Notifications view: list, add, mark all as read, delete all."""
from fastapi import APIRouter, Depends, HTTPException, status

from pantrypal.api.dependencies import get_session
from pantrypal.domain.errors import InvalidFieldError
from pantrypal.logic.session import Session
from pantrypal.utilities.validators import NotificationInput

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("")
def list_notifications(session: Session = Depends(get_session)):
    messages = session.list_notifications()
    return {"notifications": messages, "count": len(messages)}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_notification(data: NotificationInput, session: Session = Depends(get_session)):
    try:
        session.add_notification(data.message)
    except InvalidFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": True}


@router.post("/read")
def mark_all_read(session: Session = Depends(get_session)):
    return {"success": True, "marked": session.mark_notifications_read()}


@router.delete("")
def delete_all(session: Session = Depends(get_session)):
    session.clear_notifications()
    return {"success": True}
