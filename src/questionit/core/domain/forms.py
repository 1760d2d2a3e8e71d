"""Valores de parámetros y formularios pre-construidos.

Un parámetro puede ser:
- un escalar (`str`, `int`, `float`, `bool`), convertido a texto al enviarse;
- una secuencia de escalares (un campo repetido o una lista JSON);
- un `Attachment` binario, válido solo en endpoints multipart;
- `None`, que equivale a "ausente" y nunca se envía.

`MultipartForm` y `UrlEncodedForm` permiten pasar un formulario ya armado en
lugar de un dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import IO, Iterator, Mapping, Sequence, Union
from urllib.parse import urlencode


@dataclass(frozen=True)
class Attachment:
    """Archivo binario adjunto a un formulario multipart."""

    content: bytes | IO[bytes]
    filename: str = "file"
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path, *, content_type: str | None = None) -> "Attachment":
        return cls(content=path.read_bytes(), filename=path.name, content_type=content_type)


Scalar = Union[str, int, float, bool, Enum]
ParamValue = Union[Scalar, Sequence[Scalar], Attachment, None]
FormValue = Union[str, Attachment]


def stringify(value: Scalar) -> str:
    """Representación textual natural de un escalar, tal y como la espera la API."""

    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_sequence_value(value: object) -> bool:
    return isinstance(value, (list, tuple))


@dataclass
class MultipartForm:
    """Formulario multipart: campos de texto y adjuntos, en orden de inserción."""

    entries: list[tuple[str, FormValue]] = field(default_factory=list)

    def append(self, name: str, value: ParamValue) -> None:
        if value is None:
            return
        if isinstance(value, Attachment):
            self.entries.append((name, value))
        elif is_sequence_value(value):
            for item in value:  # type: ignore[union-attr]
                self.entries.append((name, stringify(item)))
        else:
            self.entries.append((name, stringify(value)))  # type: ignore[arg-type]

    def names(self) -> list[str]:
        return [name for name, _ in self.entries]

    def get(self, name: str) -> FormValue | None:
        for key, value in self.entries:
            if key == name:
                return value
        return None

    def __iter__(self) -> Iterator[tuple[str, FormValue]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class UrlEncodedForm:
    """Formulario `application/x-www-form-urlencoded` (solo texto)."""

    entries: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, params: Mapping[str, ParamValue]) -> "UrlEncodedForm":
        form = cls()
        for name, value in params.items():
            form.append(name, value)
        return form

    def append(self, name: str, value: ParamValue) -> None:
        if value is None:
            return
        if isinstance(value, Attachment):
            raise TypeError(
                f"Field {name!r} is a binary attachment; only multipart endpoints accept files."
            )
        if is_sequence_value(value):
            for item in value:  # type: ignore[union-attr]
                self.entries.append((name, stringify(item)))
        else:
            self.entries.append((name, stringify(value)))  # type: ignore[arg-type]

    def encode(self) -> str:
        return urlencode(self.entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return self.encode()


Params = Union[Mapping[str, ParamValue], MultipartForm, UrlEncodedForm]
