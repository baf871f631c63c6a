from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from level.api.error import ClientError, ServerError
from level.app.services.unit_of_work import UnitOfWork
from level.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
)
from level.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Only shape is checked here; field rules (formats, lengths, uniqueness)
    are enforced by the signup changeset so errors come back per field.
    """

    team_name: str = Field(..., description="Team/organization name")
    team_slug: str = Field(..., description="Team slug used on login")
    email: str = Field(..., description="Owner email address")
    username: str = Field(..., description="Owner username")
    password: str = Field(..., description="Owner password (min 6 chars)")
    time_zone: Optional[str] = Field(None, description="IANA time zone, defaults to UTC")


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Team Signup

    Creates a team and its OWNER, and returns a JWT access token.

    Raises:
        - 422 Unprocessable Entity: VALIDATION_FAILED with per-field details
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(**request.model_dump())

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    team_slug: str = Field(..., description="Team slug")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: User disabled
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.team_slug, request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "USER_DISABLED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value
