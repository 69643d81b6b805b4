"""Infrastructure layer: database, outbound HTTP client, HTTP app.

This layer depends on stdlib and third-party libs (SQLAlchemy, httpx, Starlette).
"""
