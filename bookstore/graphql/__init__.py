"""
GraphQL Package

This package provides the catalog's GraphQL API using Strawberry GraphQL.

Features:
- Book, Author and Review types with a derived averageReview
- Queries: books, pagedBooks, book
- Mutations: addBook, updateBook, deleteBook
- Input validation with descriptive errors

Usage:
    The GraphQL endpoint is available at /graphql with an
    interactive GraphiQL IDE for development.

Example Query:
    query {
        pagedBooks(page: 1, pageSize: 10) {
            books {
                id
                title
                authors { name }
                averageReview
            }
            totalCount
            hasNextPage
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from bookstore.graphql.context import get_context
from bookstore.graphql.mutations import Mutation
from bookstore.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(ide_enabled: bool = True) -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Args:
        ide_enabled: Serve the GraphiQL IDE on GET requests

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if ide_enabled else None,
    )


__all__ = ["schema", "create_graphql_router"]
