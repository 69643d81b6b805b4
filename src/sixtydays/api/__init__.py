"""REST interface for cards (Starlette app served by uvicorn)."""
