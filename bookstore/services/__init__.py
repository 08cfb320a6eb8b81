"""
Services Package

Domain logic that does not depend on HTTP or GraphQL:
- ids.py: Pluggable identifier generation (ObjectId strings by default)
- pagination.py: Page metadata calculations
- ratings.py: Average review rating
- seed.py: Demo catalog seeding
"""
