"""Códigos de error de la API QuestionIt.

Cada bloque arranca en un valor fijo según la clase HTTP que lo acompaña:
- 400 → desde 1
- 401 → desde 100
- 403 → desde 200
- 404 → desde 300
- 429 → 450
- 500 → 500
"""

from __future__ import annotations

from enum import IntEnum


class ApiErrorCode(IntEnum):
    """Valor de `code` en el cuerpo de error devuelto por la API."""

    # 400
    BAD_REQUEST = 1
    MISSING_PARAMETER = 2
    INVALID_PARAMETER = 3
    ASKED_USER_MISMATCH = 4
    RELATION_SHOULD_BE_BETWEEN_TWO_DIFFERENT_USERS = 5
    SLUG_ALREADY_USED = 6
    DAY_QUESTION_EXPIRED = 7
    UNSUPPORTED_LANGUAGE = 8
    TOO_LONG_QUESTION = 9
    TOO_LONG_ANSWER = 10
    NAME_INVALID_CHARACTERS = 11
    SLUG_INVALID_CHARACTERS = 12
    INVALID_SENT_FILE = 13
    INVALID_SENT_HEADER = 14
    INVALID_SENT_PROFILE_PICTURE = 15
    INVALID_POLL_ANSWER = 16
    TAKEN_POLL = 17
    NON_UNIQUE_POLL = 18
    TOKEN_ALREADY_APPROVED = 19

    # 401
    INVALID_EXPIRED_TOKEN = 100
    TOKEN_MISMATCH = 101
    ALREADY_ANSWERED = 102

    # 403
    FORBIDDEN = 200
    DONT_ALLOW_ANONYMOUS_QUESTIONS = 201
    ASKER_USER_MISMATCH = 202
    INVALID_TWITTER_CREDENTIALS = 203
    INVALID_TWITTER_CALLBACK_KEYS = 204
    CANT_SEND_QUESTION_TO_YOURSELF = 205
    TOO_MANY_REPLIES = 206
    NOT_ANSWERED_YET = 207
    BLOCK_BY_THIS_USER = 208
    HAVE_BLOCKED_THIS_USER = 209
    BANNED_USER = 210
    TOKEN_NOT_AFFILATED = 211
    TOO_MANY_APPLICATIONS = 212
    SAME_APP_NAME = 213
    INVALID_TOKEN_RIGHTS = 214

    # 404
    USER_NOT_FOUND = 300
    PAGE_NOT_FOUND = 301
    RESOURCE_NOT_FOUND = 302
    ORIGINAL_QUESTION_NOT_FOUND = 303
    QUESTION_NOT_FOUND = 304
    POLL_NOT_FOUND = 305
    APPLICATION_NOT_FOUND = 306

    # 429
    TOO_MANY_REQUESTS = 450

    # 500
    SERVER_ERROR = 500

    @classmethod
    def lookup(cls, value: object) -> "ApiErrorCode | None":
        """Devuelve el miembro para `value`, o `None` si la API envió un código desconocido."""

        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def http_status(self) -> int:
        """Clase HTTP con la que la API acompaña este código."""

        if self.value < 100:
            return 400
        if self.value < 200:
            return 401
        if self.value < 300:
            return 403
        if self.value < 450:
            return 404
        if self.value < 500:
            return 429
        return 500
