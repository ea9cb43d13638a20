"""User account routes.

Bodies are read leniently; a body that is not a JSON object is treated as
having no fields, which the use cases report as a validation error.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status

from board.application.usecase.auth import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    SignupRequest,
    SignupResponse,
    SignupUseCase,
)
from board.interface.api.body import read_json_object

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    http_request: Request,
    signup_use_case: FromDishka[SignupUseCase],
) -> SignupResponse:
    """Create an account and return a token for it.

    Body: ``{"name": ..., "email": ..., "password": ...}``.
    """
    body = await read_json_object(http_request)
    return await signup_use_case.execute(
        SignupRequest(
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
        )
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    http_request: Request,
    login_use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange email and password for a token."""
    body = await read_json_object(http_request)
    return await login_use_case.execute(
        LoginRequest(email=body.get("email"), password=body.get("password"))
    )
