"""Mensajes de Retrieve Documents.

Los `DocumentId` llegan en las respuestas de Nurse Lookup y se pasan aquí
para obtener el documento en sí. La API admite hasta cinco por llamada.
"""

from __future__ import annotations

from pydantic import Field

from nursys.core.domain.models import Items, NursysModel, SubmitResponseMessage


class RetrieveDocumentResponse(NursysModel):
    success_flag: bool = Field(default=False, alias="SuccessFlag")
    document_id: str = Field(default="", alias="DocumentId")
    document_name: str = Field(
        default="",
        alias="DocumentName",
        description="Nombre del documento, con extensión.",
    )
    document_contents: str = Field(
        default="",
        alias="DocumentContents",
        description="Contenido tal como lo envía Nursys; no se decodifica.",
    )


class RetrieveDocumentsRetrieveResponseMessage(SubmitResponseMessage):
    documents: Items[RetrieveDocumentResponse] = Field(default_factory=list, alias="Documents")
