"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules under ``api/endpoints``;
``main`` includes it into the application.
"""
