"""Authentication endpoints: register, login, logout and identity lookup."""
from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from catalog.interfaces.http.deps import get_auth_service, get_bearer_token, get_current_account
from catalog.modules.accounts import AccountProfile, AuthService
from catalog.schemas import (
    AccountLookup,
    AccountResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
)

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse[AccountResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
)
async def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse[AccountResponse]:
    account = await auth_service.register(
        payload.email,
        payload.password,
        username=payload.username,
        profile=payload.model_dump(include={"name", "lastname"}),
    )
    return MessageResponse(
        message="User created successfully",
        data=AccountResponse.model_validate(account),
    )


@router.post("/login", response_model=MessageResponse[AccountResponse], summary="Log in and receive a bearer token")
async def login(
    payload: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse[AccountResponse]:
    account, token = await auth_service.login(payload.email, payload.password)
    response.headers["Authorization"] = f"Bearer {token}"
    return MessageResponse(
        message="User logged in successfully",
        data=AccountResponse.model_validate(account),
    )


@router.post("/logout", response_model=MessageResponse[AccountResponse], summary="End the current session")
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse[AccountResponse]:
    account = await auth_service.logout(token)
    return MessageResponse(
        message="User logged out successfully",
        data=AccountResponse.model_validate(account),
    )


@router.get("/look-up", response_model=MessageResponse[AccountLookup], summary="Details of the signed-in account")
async def look_up(account: AccountProfile = Depends(get_current_account)) -> MessageResponse[AccountLookup]:
    return MessageResponse(message="DETAIL OF USER", data=AccountLookup.model_validate(account))
