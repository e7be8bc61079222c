# app/users/controller.py
from fastapi import APIRouter, Request, Response, status

from ..auth.service import SessionUser, TokenIssuerDep
from ..core.config import get_settings
from ..core.rate_limiter import limiter
from ..database.core import DbSession
from ..orders.dependencies import OwnedOrder
from ..schemas.common import ApiResponse
from ..schemas.orders import OrderData, OrderListData, OrderResponse
from ..schemas.products import ProductListData, ProductResponse
from ..schemas.user import (
    LoginData,
    LoginRequest,
    NewUserData,
    RegisterUserRequest,
    UpdateUserRequest,
    UserData,
    UserListData,
    UserResponse,
)
from .dependencies import OwnedUser
from .service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=ApiResponse[NewUserData], status_code=status.HTTP_201_CREATED)
async def create_user(register_request: RegisterUserRequest, db: DbSession):
    """Register a new account"""
    new_user = await UserService.register_user(db, register_request)
    return ApiResponse(data=NewUserData(new_user=UserResponse.model_validate(new_user)))


@router.post("/login", response_model=ApiResponse[LoginData])
@limiter.limit(get_settings().LOGIN_RATE_LIMIT)
async def login(request: Request, login_request: LoginRequest, db: DbSession, token_issuer: TokenIssuerDep):
    """Exchange email and password for a bearer token"""
    user, token = await UserService.login(db, token_issuer, login_request)
    return ApiResponse(data=LoginData(user=UserResponse.model_validate(user), token=token))


@router.get("", response_model=ApiResponse[UserListData])
async def get_all_users(session_user: SessionUser, db: DbSession):
    """List active users"""
    users = UserService.get_active_users(db)
    return ApiResponse(data=UserListData(users=[UserResponse.model_validate(u) for u in users]))


@router.get("/me", response_model=ApiResponse[ProductListData])
async def get_users_products(session_user: SessionUser, db: DbSession):
    """Products listed by the logged-in user, with their images"""
    products = UserService.get_user_products(db, session_user)
    return ApiResponse(data=ProductListData(products=[ProductResponse.model_validate(p) for p in products]))


@router.get("/orders", response_model=ApiResponse[OrderListData])
async def get_users_orders(session_user: SessionUser, db: DbSession):
    """Order history of the logged-in user with the purchased cart contents"""
    orders = UserService.get_user_orders(db, session_user)
    return ApiResponse(data=OrderListData(orders=[OrderResponse.model_validate(o) for o in orders]))


@router.get("/orders/{order_id}", response_model=ApiResponse[OrderData])
async def get_one_users_order(order: OwnedOrder, db: DbSession):
    """One order of the logged-in user with the purchased cart contents"""
    order = UserService.get_user_order(db, order)
    return ApiResponse(data=OrderData(order=OrderResponse.model_validate(order)))


@router.patch("/{user_id}", response_model=ApiResponse[UserData])
async def update_user(user: OwnedUser, update_request: UpdateUserRequest, db: DbSession):
    """Update username and/or email of the caller's own account"""
    updated = UserService.update_user(db, user, update_request)
    return ApiResponse(data=UserData(user=UserResponse.model_validate(updated)))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user: OwnedUser, db: DbSession):
    """Deactivate the caller's own account (soft delete)"""
    UserService.deactivate_user(db, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
