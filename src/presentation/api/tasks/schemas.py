"""
Tasks Schemas - Modeles Pydantic pour les endpoints tasks.

Le statut n'est pas accepte a la creation: une tache nait "TODO".
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreateTaskRequest(BaseModel):
    """Requete de creation de tache."""

    title: str = Field(..., description="Titre")
    description: str = Field(..., description="Description")
    owner_id: str = Field(..., description="ID de l'utilisateur createur")


class CreatedTaskResponse(BaseModel):
    """Tache creee."""

    id: str
    title: str
    description: str
    status: str
    owner_id: str


class TaskResponse(BaseModel):
    """Representation complete d'une tache."""

    id: str
    title: str
    description: str
    status: str
    owner_id: str
    assignee_id: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class TaskListResponse(BaseModel):
    tasks: list[TaskResponse]
