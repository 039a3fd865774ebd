"""Shopping list view (kept in memory for the signed-in user)."""
from fastapi import APIRouter, Depends, HTTPException, status

from pantrypal.api.dependencies import get_session
from pantrypal.logic.session import Session
from pantrypal.utilities.validators import ShoppingListItemInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])


@router.get("")
def list_items(session: Session = Depends(get_session)):
    items = session.list_shopping_items()
    return {"items": [item.to_dict() for item in items], "count": len(items)}


@router.post("", status_code=status.HTTP_201_CREATED)
def add_item(data: ShoppingListItemInput, session: Session = Depends(get_session)):
    item = session.add_shopping_item(data.to_item())
    return {"success": True, "item": item.to_dict()}


@router.post("/clear")
def clear_list(session: Session = Depends(get_session)):
    session.clear_shopping_list()
    return {"success": True}


@router.delete("/{name}")
def remove_item(name: str, session: Session = Depends(get_session)):
    if not session.remove_shopping_item(name):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return {"success": True}
