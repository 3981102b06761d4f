"""Modelos compartidos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los nombres de campo en el cable son PascalCase y los dicta Nursys; con
  `alias` mantenemos snake_case en Python sin renegociar el contrato.
- La validación ocurre en el borde (decodificación de la respuesta) y un
  fallo se reporta como `DecodingError`, nunca a medias.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, Field
from pydantic.config import ConfigDict

from nursys.core.domain.timestamps import Timestamp

T = TypeVar("T")


def _none_as_empty(value: Any) -> Any:
    # Nursys manda `null` donde debería mandar `[]`.
    return [] if value is None else value


Items = Annotated[list[T], BeforeValidator(_none_as_empty)]
"""Lista que acepta `null` en el cable como lista vacía."""


class NursysModel(BaseModel):
    """Base de todos los mensajes: alias PascalCase y extras ignorados."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TransactionError(NursysModel):
    """Error de procesamiento reportado dentro de una transacción."""

    error_id: int = Field(
        ...,
        alias="ErrorID",
        description="Identificador del error asignado por el sistema.",
    )
    error_message: str = Field(
        default="",
        alias="ErrorMessage",
        description="Mensaje de error provisto por el sistema.",
    )


class Transaction(NursysModel):
    """Información sobre la petición y su procesamiento.

    Por qué un modelo separado:
    - Todas las respuestas (submit y retrieve) la incluyen.
    - `transaction_id` es la entrada del GET que recupera resultados.
    - Un `success_flag` en `False` es un fallo *de negocio*: la llamada HTTP
      fue correcta y el detalle viaja en `errors`.
    - Nursys puede omitir campos; como en el resto de mensajes, lo ausente
      toma su valor vacío en lugar de invalidar la respuesta.
    """

    transaction_id: str = Field(
        default="",
        alias="TransactionId",
        description="Identificador único de la transacción.",
    )
    transaction_date: Timestamp | None = Field(
        default=None,
        alias="TransactionDate",
        description="Fecha y hora en que se procesó la petición.",
    )
    transaction_comment: str | None = Field(
        default=None,
        alias="TransactionComment",
        description="Comentarios del sistema sobre el procesamiento.",
    )
    success_flag: bool = Field(
        default=False,
        alias="TransactionSuccessFlag",
        description="Indica si la petición se procesó correctamente.",
    )
    errors: Items[TransactionError] = Field(
        default_factory=list,
        alias="TransactionErrors",
        description="Errores de sistema ocurridos durante el procesamiento.",
    )


class SubmitResponseMessage(NursysModel):
    """Respuesta de todos los POST asíncronos: solo la transacción."""

    transaction: Transaction = Field(..., alias="Transaction")


class RetrieveResponseMessage(NursysModel):
    """Parte común de los GET que recuperan el resultado de un submit."""

    processing_complete: bool = Field(
        default=False,
        alias="ProcessingCompleteFlag",
        description="Indica si la API terminó de procesar la petición.",
    )
    transaction: Transaction = Field(..., alias="Transaction")
