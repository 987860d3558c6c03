"""
rest_data.api

API package for the REST Data service.

Responsibilities:
- FastAPI app factory, resource declarations, and health routes.
- API-layer dependency wiring.
"""

# Package marker.
