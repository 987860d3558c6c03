"""
rest_data.api.resources

Resource declarations served by the application.

Responsibilities:
- Declare one `EntityResource` per exposed entity.
- List them in `DEFAULT_RESOURCES` for the app factory.
"""

from __future__ import annotations

from rest_data.db.models import Member
from rest_data.rest.properties import ResourceProperties
from rest_data.rest.resource import EntityResource


class MemberResource(EntityResource):
    # Served under /member; HAL documents on request.
    entity = Member
    properties = ResourceProperties(hal=True)


DEFAULT_RESOURCES: tuple[type[EntityResource], ...] = (MemberResource,)
