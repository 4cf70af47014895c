# client_api/__init__.py

"""Client CRUD API (FastAPI, hexagonal layout)."""

__version__ = "1.0.0"
