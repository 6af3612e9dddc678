"""Users API - Endpoints des utilisateurs."""
