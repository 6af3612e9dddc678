"""
Presentation Layer - Adapters d'entree.

Cette couche contient l'API REST FastAPI (api/) qui traduit les
requetes HTTP en appels aux use cases de l'application.
"""

__all__ = []
