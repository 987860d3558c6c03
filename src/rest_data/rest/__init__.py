"""
rest_data.rest

Resource declarations and the CRUD route generator.

Responsibilities:
- Declarative resource/method switches (path, alternate media type, paging, exposure).
- Derive resource paths from class names.
- Turn an `EntityResource` subclass into a FastAPI router.
"""

from rest_data.rest.properties import MethodProperties, ResourceProperties
from rest_data.rest.resource import EntityResource
from rest_data.rest.router import build_router

__all__ = ["EntityResource", "MethodProperties", "ResourceProperties", "build_router"]
