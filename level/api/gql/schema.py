import logging
from typing import Optional
from uuid import UUID

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from level.app.use_cases.auth import GetViewerUseCase
from level.app.use_cases.spaces import (
    CreateSpaceCommand,
    CreateSpaceUseCase,
    GetSpaceUserUseCase,
    RevokeOpenInvitationUseCase,
)

from .objects import (
    CreateSpacePayload,
    RevokeOpenInvitationPayload,
    SpaceType,
    SpaceUserType,
    UserType,
    payload_errors,
)

logger = logging.getLogger(__name__)


def _current_user_id(info: Info) -> UUID:
    return UUID(info.context["current_user"]["user_id"])


def _parse_id(value: strawberry.ID) -> Optional[UUID]:
    try:
        return UUID(str(value))
    except ValueError:
        return None


@strawberry.type
class Query:
    @strawberry.field(description="The authenticated user")
    async def viewer(self, info: Info) -> UserType:
        async with info.context["db_lock"]:
            result = await GetViewerUseCase(info.context["uow"]).execute(
                _current_user_id(info)
            )
        if result.is_err():
            raise GraphQLError(result.error.message)
        return UserType.from_info(result.value)

    @strawberry.field(description="The authenticated user's membership in a space")
    async def space_user(self, info: Info, space_id: strawberry.ID) -> Optional[SpaceUserType]:
        space_uuid = _parse_id(space_id)
        if space_uuid is None:
            raise GraphQLError("Space not found")

        async with info.context["db_lock"]:
            result = await GetSpaceUserUseCase(info.context["uow"]).execute(
                _current_user_id(info), space_uuid
            )
        if result.is_err():
            raise GraphQLError(result.error.message)
        return SpaceUserType.from_response(result.value)


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create a space with an active open invitation")
    async def create_space(self, info: Info, name: str, slug: str) -> CreateSpacePayload:
        async with info.context["db_lock"]:
            result = await CreateSpaceUseCase(info.context["uow"]).execute(
                _current_user_id(info), CreateSpaceCommand(name=name, slug=slug)
            )
        if result.is_err():
            return CreateSpacePayload(success=False, errors=payload_errors(result.error))
        return CreateSpacePayload(success=True, space=SpaceType.from_info(result.value.space))

    @strawberry.mutation(description="Revoke the open invitation of a space")
    async def revoke_open_invitation(
        self, info: Info, space_id: strawberry.ID
    ) -> RevokeOpenInvitationPayload:
        space_uuid = _parse_id(space_id)
        if space_uuid is None:
            raise GraphQLError("Space not found")

        async with info.context["db_lock"]:
            result = await RevokeOpenInvitationUseCase(info.context["uow"]).execute(
                _current_user_id(info), space_uuid
            )
        if result.is_err():
            logger.warning(f"Revoke open invitation failed: {result.error.code}")
            return RevokeOpenInvitationPayload(
                success=False, errors=payload_errors(result.error)
            )
        return RevokeOpenInvitationPayload(success=True)


schema = strawberry.Schema(query=Query, mutation=Mutation)
