from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from level.api.error import ClientError, ServerError
from level.app.services.unit_of_work import UnitOfWork
from level.app.use_cases.invitations import (
    AcceptInvitationCommand,
    AcceptInvitationResponse,
    AcceptOpenInvitationUseCase,
    GetOpenInvitationUseCase,
    OpenInvitationResponse,
)
from level.depends import get_unit_of_work

router = APIRouter(prefix="/invites", tags=["Invitations"])


@router.get(
    "/{token}", status_code=status.HTTP_200_OK, response_model=OpenInvitationResponse
)
async def get_open_invitation(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Show Open Invitation

    Returns the space and team behind an active invitation link.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND (unknown or revoked token)
        - 500 Internal Server Error: Server error
    """
    use_case = GetOpenInvitationUseCase(uow)
    result = await use_case.execute(token)

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class AcceptInvitationRequest(BaseModel):
    """Signup payload for joining through an open invitation"""

    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username, unique within the team")
    password: str = Field(..., description="Password (min 6 chars)")
    time_zone: Optional[str] = Field(None, description="IANA time zone, defaults to UTC")


@router.post(
    "/{token}/accept",
    status_code=status.HTTP_201_CREATED,
    response_model=AcceptInvitationResponse,
)
async def accept_open_invitation(
    token: str,
    request: AcceptInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Open Invitation

    Signs a new member up into the space's team and joins them to the space.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND (unknown or revoked token)
        - 422 Unprocessable Entity: VALIDATION_FAILED with per-field details
        - 500 Internal Server Error: Server error
    """
    use_case = AcceptOpenInvitationUseCase(uow)
    result = await use_case.execute(token, AcceptInvitationCommand(**request.model_dump()))

    if result.is_err():
        error = result.error
        if error.code == "INVITATION_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "VALIDATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value
