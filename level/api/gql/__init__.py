from strawberry.fastapi import GraphQLRouter

from .context import get_context
from .schema import schema


def graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context)


__all__ = ["graphql_router", "schema"]
