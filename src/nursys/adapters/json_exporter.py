"""Exportación JSON de respuestas.

Por qué JSON:
- Permite guardar el resultado de una transacción tal como lo entrega Nursys
  (nombres PascalCase y timestamps canónicos) para otras herramientas.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def export_response_json(*, response: BaseModel, output_path: Path) -> Path:
    """Exporta una respuesta a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = response.model_dump(mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
