"""HTTP endpoints of the service.

The core endpoints report the service health and list the documentation
groups, each with the URL of its OpenAPI document.
"""
