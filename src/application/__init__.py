"""
Application Layer - Orchestration des Use Cases.

Cette couche contient:
    - use_cases/: Cas d'utilisation et leurs DTOs d'entree/sortie

Principes:
    - Depend uniquement du domaine (entites et ports)
    - Les gateways sont injectes par constructeur
    - Les erreurs du domaine et de l'infrastructure sont propagees
      sans traduction, et restent distinguables
"""

__all__ = []
