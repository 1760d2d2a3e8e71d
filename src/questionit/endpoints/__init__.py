"""Endpoints de la API agrupados por área.

Cada módulo aporta un mixin que `questionit.client.QuestionIt` combina; ninguno
tiene estado propio.
"""

from questionit.endpoints.auth import AuthEndpoints
from questionit.endpoints.likes import LikesEndpoints
from questionit.endpoints.notifications import NotificationsEndpoints
from questionit.endpoints.questions import QuestionsEndpoints
from questionit.endpoints.relationships import RelationshipsEndpoints
from questionit.endpoints.users import UsersEndpoints

__all__ = [
    "AuthEndpoints",
    "LikesEndpoints",
    "NotificationsEndpoints",
    "QuestionsEndpoints",
    "RelationshipsEndpoints",
    "UsersEndpoints",
]
