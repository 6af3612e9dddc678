"""
API REST FastAPI.

Usage:
------
    from src.presentation.api.main import create_app

    app = create_app()
"""
