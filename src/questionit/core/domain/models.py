"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Tipa las entidades que devuelve la API sin acoplar el Core a librerías de I/O.
- `extra="allow"` conserva cualquier campo que la API añada en el futuro.

Nota:
- Son objetos de transferencia puros: el cliente los construye a partir del
  JSON recibido y nunca los modifica ni interpreta.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class NotificationType(str, Enum):
    """Tipos de notificación emitidos por la API."""

    ANSWERED = "answered"
    QUESTION = "question"
    FOLLOW = "follow"
    FOLLOW_BACK = "follow-back"


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SentRelationship(_ApiModel):
    following: bool = False
    followed_by: bool = False
    has_blocked: bool = False
    is_blocked_by: bool = False


class SentPoll(_ApiModel):
    id: str = Field(..., description="Identificador de la encuesta.")
    options: list[str] = Field(
        default_factory=list,
        description="Opciones de respuesta (entre 2 y 4).",
    )


class SentQuestionAttachements(_ApiModel):
    poll: SentPoll | None = None


class SentUser(_ApiModel):
    """Usuario tal y como lo serializa la API."""

    id: str = Field(..., description="Identificador del usuario.")
    name: str = Field(default="", description="Nombre visible.")
    slug: str = Field(default="", description="Handle público (@slug).")
    twitter_id: str | None = None
    ask_me_message: str = ""
    created_at: str | None = None
    profile_picture: str | None = None
    banner_picture: str | None = None
    allow_anonymous: bool = False
    default_send_twitter: bool | None = None
    allow_question_of_the_day: bool | None = None
    visible: bool = True

    # Información avanzada (solo en algunos endpoints)
    pinned_question: SentQuestion | None = None
    question_count: int = 0
    follower_count: int = 0
    following_count: int = 0
    relationship: SentRelationship | None = None
    drop_on_block_match: bool | None = None
    safe_mode: bool | None = None


class SentQuestion(_ApiModel):
    """Pregunta (respondida o no) con su emisor y receptor."""

    id: str = Field(..., description="Identificador de la pregunta.")
    emitter: SentUser | None = Field(
        default=None,
        description="Autor; `None` para preguntas anónimas.",
    )
    receiver: SentUser | None = None
    like_count: int = 0
    created_at: str | None = None
    content: str = ""
    seen: bool = False
    answer: str | None = None
    answer_created_at: str | None = None
    in_reply_to: str | None = None
    reply_count: int = 0
    liked: bool = False
    of_the_day: bool = Field(default=False, description="Pregunta del día (QOTD).")
    image: str | None = None
    is_gif: bool = False
    attachements: SentQuestionAttachements | None = None


class SentNotification(_ApiModel):
    id: str
    created_at: str | None = None
    seen: bool = False
    type: NotificationType
    # Presente si `type` es 'answered' o 'question'.
    question: SentQuestion | None = None
    # Presente si `type` es 'follow' o 'follow-back'.
    user: SentUser | None = None


class AccessTokenResult(_ApiModel):
    """Resultado del intercambio request token → access token."""

    token: str = Field(..., min_length=1, description="Access token de larga duración.")
    user: SentUser


class ApiErrorPayload(_ApiModel):
    """Cuerpo JSON que acompaña a toda respuesta no-2xx."""

    code: int
    message: str = ""
    status_code: int


SentUser.model_rebuild()


def parse_payload(model: type[BaseModel], payload: Any) -> Any:
    """Valida `payload` contra `model` si no viene vacío."""

    if payload is None:
        return None
    return model.model_validate(payload)
