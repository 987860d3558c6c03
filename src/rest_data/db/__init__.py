"""
rest_data.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, schema generation, seeding, and
  the generic entity repository.
"""

# Package marker.
