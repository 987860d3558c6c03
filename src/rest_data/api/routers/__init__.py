"""
rest_data.api.routers

Hand-written routers (everything that is not generated from a resource).
"""

# Package marker.
