"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- Book repository for data access
- Id generator for new books and authors

The context is created fresh for each GraphQL request by FastAPI's
dependency injection and passed to resolvers via the `info` parameter.
"""

from strawberry.fastapi import BaseContext

from bookstore.dependencies import BookRepositoryDep, IdGeneratorDep
from bookstore.repositories import BookRepository
from bookstore.services.ids import IdGenerator


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        repository: Book repository
        ids: Identifier generator
    """

    def __init__(self, repository: BookRepository, ids: IdGenerator):
        super().__init__()
        self.repository = repository
        self.ids = ids


async def get_context(
    repository: BookRepositoryDep,
    ids: IdGeneratorDep,
) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Args:
        repository: Injected book repository
        ids: Injected id generator

    Returns:
        GraphQLContext for the resolvers
    """
    return GraphQLContext(repository=repository, ids=ids)
