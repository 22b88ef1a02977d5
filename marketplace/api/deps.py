# marketplace/api/deps.py
from fastapi import Depends, HTTPException, Request

from marketplace.domain.context import StoreContext
from marketplace.domain.schemas import User
from marketplace.services.user_service import UserService


def get_ctx(request: Request) -> StoreContext:
    return request.app.state.ctx


def get_current_user(ctx: StoreContext = Depends(get_ctx)) -> User:
    user = UserService(ctx).get_current_user()
    if not user:
        raise HTTPException(status_code=401, detail="Brak zalogowanego uzytkownika")
    return user
