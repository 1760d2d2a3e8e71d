"""Exportación JSON de respuestas de la API.

Por qué JSON:
- Interoperabilidad con `jq` y otras herramientas.
- Permite guardar una página de resultados tal cual la devolvió la API.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def dump_payload(payload: Any) -> str:
    """Serializa un payload decodificado (o un modelo) como JSON UTF-8 estable."""

    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_payload_json(*, payload: Any, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_payload(payload) + "\n", encoding="utf-8")
    return output_path
