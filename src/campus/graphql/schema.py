"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from ..errors import IntegrityGap
from ..logging import get_logger
from .discriminator import USER_VARIANTS, ensure_role_variant_lockstep
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Field and argument names are exposed exactly as declared (faculty_id, courseID)
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    types=list(USER_VARIANTS.values()),
    config=StrawberryConfig(auto_camel_case=False),
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Checks that every role has a concrete user type, that graphql-core accepts
    the schema, and that an introspection query resolves, so the server fails
    fast instead of erroring per query.

    Raises:
        IntegrityGap: If the schema is invalid or roles and user types drift
    """
    try:
        ensure_role_variant_lockstep()

        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise IntegrityGap(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise IntegrityGap(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The entity store is read from ``app.state.store`` for every request.
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": request.app.state.store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
