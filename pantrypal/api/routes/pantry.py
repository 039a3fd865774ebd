"""Pantry view: list, add, remove, change quantity, check expiration."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pantrypal.api.dependencies import get_session
from pantrypal.domain.errors import InvalidFieldError, NegativeQuantityError
from pantrypal.logic.session import Session
from pantrypal.utilities.config import DAYS_BEFORE_EXPIRY
from pantrypal.utilities.validators import PantryItemInput, QuantityUpdateInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


@router.get("")
def list_pantry(session: Session = Depends(get_session)):
    items = session.list_pantry()
    return {
        "items": [dict(item.to_dict(), expired=item.is_expired()) for item in items],
        "count": len(items),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def add_item(data: PantryItemInput, session: Session = Depends(get_session)):
    try:
        item = session.add_pantry_item(data.to_item())
    except InvalidFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": True, "item": item.to_dict()}


@router.get("/expired")
def list_expired(session: Session = Depends(get_session)):
    items = session.expired_items()
    return {"items": [item.to_dict() for item in items], "count": len(items)}


@router.post("/check-expirations")
def check_expirations(
    window: Optional[int] = Query(default=None, ge=0, description="Days ahead that count as expiring soon"),
    session: Session = Depends(get_session),
):
    """Record notifications for expired and soon-to-expire items."""
    published = session.check_expirations(window if window is not None else DAYS_BEFORE_EXPIRY)
    return {"alerts": published, "notifications": session.list_notifications()}


@router.patch("/{name}/quantity")
def update_quantity(name: str, data: QuantityUpdateInput, session: Session = Depends(get_session)):
    try:
        item = session.update_pantry_quantity(name, data.delta)
    except NegativeQuantityError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return {"success": True, "item": item.to_dict()}


@router.delete("/{name}")
def remove_item(name: str, session: Session = Depends(get_session)):
    if not session.remove_pantry_item(name):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return {"success": True}
