"""
rest_data.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation so CRUD log lines carry the request id.
"""

# Package marker.
