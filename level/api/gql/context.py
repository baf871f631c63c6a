import asyncio

from fastapi import Depends, Request

from level.app.services.unit_of_work import UnitOfWork
from level.depends import get_current_user, get_unit_of_work


async def get_context(
    request: Request,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> dict:
    """
    Build the resolver context for an authenticated GraphQL request.

    Top-level fields of a query resolve concurrently while sharing one
    session, so database access goes through ``db_lock``.
    """
    return {
        "current_user": current_user,
        "uow": uow,
        "db_lock": asyncio.Lock(),
        "config": request.app.state.config,
    }
