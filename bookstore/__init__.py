"""
BookStore API Application Package

A GraphQL catalog service for books, their authors and reviews, stored in
MongoDB.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: MongoDB client, book context, indexes and startup
- dependencies.py: Dependency injection functions
- main.py: FastAPI application factory and configuration
- models/: Book aggregate entities (pydantic)
- repositories/: MongoDB data access
- graphql/: Strawberry schema, resolvers, validation and errors
- services/: Ids, pagination, ratings and demo data seeding
"""

__version__ = "0.1.0"
