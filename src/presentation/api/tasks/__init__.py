"""Tasks API - Endpoints des taches."""
