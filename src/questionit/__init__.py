"""Cliente Python asíncrono para la API de QuestionIt (https://questionit.space)."""

from __future__ import annotations

from questionit.client import QuestionIt
from questionit.core.config import ClientSettings
from questionit.core.domain.error_codes import ApiErrorCode
from questionit.core.domain.forms import Attachment, MultipartForm, UrlEncodedForm
from questionit.core.domain.models import (
    AccessTokenResult,
    ApiErrorPayload,
    NotificationType,
    SentNotification,
    SentPoll,
    SentQuestion,
    SentQuestionAttachements,
    SentRelationship,
    SentUser,
)
from questionit.core.errors import (
    InvalidPollError,
    QuestionItApiError,
    QuestionItError,
    is_api_error,
)
from questionit.core.services.response_handler import RawResult

__version__ = "0.1.0"

__all__ = [
    "AccessTokenResult",
    "ApiErrorCode",
    "ApiErrorPayload",
    "Attachment",
    "ClientSettings",
    "InvalidPollError",
    "MultipartForm",
    "NotificationType",
    "QuestionIt",
    "QuestionItApiError",
    "QuestionItError",
    "RawResult",
    "SentNotification",
    "SentPoll",
    "SentQuestion",
    "SentQuestionAttachements",
    "SentRelationship",
    "SentUser",
    "UrlEncodedForm",
    "is_api_error",
]
