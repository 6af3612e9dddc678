#!/usr/bin/env python3
"""
Point d'entree principal pour lancer l'API Taskboard.

Usage:
------
    python3 run.py
    # ou directement:
    uvicorn src.presentation.api.main:create_app --factory --reload

Variables d'environnement:
--------------------------
- HOST: Interface d'ecoute (defaut: 127.0.0.1)
- PORT: Port d'ecoute (defaut: 8000)
- Voir src/infrastructure/config/settings.py pour le reste
"""
import os

import uvicorn


def main():
    """Lance l'API avec uvicorn."""
    uvicorn.run(
        "src.presentation.api.main:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
