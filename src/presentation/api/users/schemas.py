"""
Users Schemas - Modeles Pydantic pour les endpoints users.

Responsabilite unique:
----------------------
Definir les schemas de requete/reponse. Les regles metier (longueur
du nom, format de l'email, role...) restent dans l'entite User:
les schemas ne verifient que la presence et le type des champs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Requete de creation d'utilisateur."""

    name: str = Field(..., description="Nom (3 caracteres minimum)")
    email: str = Field(..., description="Email")
    password: str = Field(..., description="Mot de passe (8 caracteres minimum)")
    role: str = Field(..., description="Role (Admin ou User)")


class CreatedUserResponse(BaseModel):
    """Utilisateur cree (sans mot de passe)."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime


class UserResponse(BaseModel):
    """Representation d'un utilisateur."""

    id: str
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserListResponse(BaseModel):
    """Liste des utilisateurs, dans l'ordre de stockage."""

    users: list[UserResponse]
