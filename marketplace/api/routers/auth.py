# marketplace/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException

from marketplace.api.deps import get_ctx, get_current_user
from marketplace.domain.context import StoreContext
from marketplace.domain.errors import NotAuthenticatedError
from marketplace.domain.schemas import LoginIn, LogoutOut, ProfileUpdate, RegisterIn, User
from marketplace.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_service(ctx: StoreContext):
    return UserService(ctx)


@router.post("/register", response_model=User, status_code=201)
def register(payload: RegisterIn, ctx: StoreContext = Depends(get_ctx)):
    svc = get_service(ctx)
    try:
        return svc.register(payload.email, payload.password, payload.username)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/login", response_model=User)
def login(payload: LoginIn, ctx: StoreContext = Depends(get_ctx)):
    svc = get_service(ctx)
    try:
        return svc.login(payload.email, payload.password)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/logout", response_model=LogoutOut)
def logout(ctx: StoreContext = Depends(get_ctx)):
    return {"logged_out": get_service(ctx).logout()}


@router.get("/me", response_model=User)
def me(user: User = Depends(get_current_user)):
    return user


@router.patch("/me", response_model=User)
def update_profile(payload: ProfileUpdate, ctx: StoreContext = Depends(get_ctx)):
    svc = get_service(ctx)
    try:
        return svc.update_profile(payload)
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
