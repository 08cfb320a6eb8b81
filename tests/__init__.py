"""
Test Suite for the BookStore API

Test Organization:
- conftest.py: Shared fixtures (mongomock database, repository, client, sample data)
- test_services.py: Ids, ratings and pagination helpers
- test_models.py: Book entity and document mapping
- test_validation.py: Resolver input rules
- test_repository.py: BookRepository against mongomock
- test_database.py: Indexes, startup initialization and demo seeding
- test_config.py: Settings validation
- test_graphql_queries.py / test_graphql_mutations.py: GraphQL API
- test_main.py: Health and root endpoints

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=bookstore --cov-report=html

    # Run specific file
    pytest tests/test_graphql_mutations.py
"""
