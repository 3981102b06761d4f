"""Mensajes de Manage Nurse List (alta/actualización/baja de enfermeras).

Flujo asíncrono:
- POST `/managenurselist` con un lote -> devuelve un `TransactionId`.
- GET `/managenurselist?transactionId=...` más tarde -> resultados por registro.
"""

from __future__ import annotations

from pydantic import Field

from nursys.core.domain.constants import LicenseType, SubmissionActionCode
from nursys.core.domain.models import (
    Items,
    NursysModel,
    RetrieveResponseMessage,
    SubmitResponseMessage,
    TransactionError,
)


class ManageNurseListRequest(NursysModel):
    """Una enfermera a añadir, actualizar o quitar de la lista de la institución.

    Hay que enviar alguna combinación de jurisdicción, tipo de licencia,
    número de licencia y NCSBN ID (ver reglas de matching de la API).
    Los campos opcionales en `None` no se envían.
    """

    submission_action_code: SubmissionActionCode | str = Field(..., alias="SubmissionActionCode")
    jurisdiction_abbreviation: str | None = Field(default=None, alias="JurisdictionAbbreviation")
    license_number: str | None = Field(default=None, alias="LicenseNumber")
    license_type: LicenseType | str | None = Field(default=None, alias="LicenseType")
    # En las respuestas llega como "" cuando está vacío, y como número si no.
    ncsbn_id: int | str | None = Field(default=None, alias="NcsbnId")
    email: str | None = Field(default=None, alias="Email")
    address1: str = Field(default="", alias="Address1")
    address2: str | None = Field(default=None, alias="Address2")
    city: str = Field(default="", alias="City")
    state: str = Field(default="", alias="State")
    zip: str = Field(default="", alias="Zip")
    last_four_ssn: str = Field(default="", alias="LastFourSSN")
    birth_year: int | str = Field(default="", alias="BirthYear")
    hospital_practice_setting: str | None = Field(default=None, alias="HospitalPracticeSetting")
    hospital_practice_setting_other: str | None = Field(default=None, alias="HospitalPracticeSettingOther")
    notifications_enabled: str = Field(default="", alias="NotificationsEnabled")
    reminders_enabled: str = Field(default="", alias="RemindersEnabled")
    record_id: str | None = Field(
        default=None,
        alias="RecordId",
        description="Identificador propio del cliente; se devuelve tal cual en la respuesta.",
    )
    location_list: str | None = Field(
        default=None,
        alias="LocationList",
        description="Lista de códigos de ubicación separados por `|`.",
    )


class ManageNurseListSubmitRequestMessage(NursysModel):
    requests: list[ManageNurseListRequest] = Field(default_factory=list, alias="ManageNurseListRequests")


class ManageNurseListSubmitResponseMessage(SubmitResponseMessage):
    pass


class ManageNurseListResponse(NursysModel):
    """Resultado individual de una enfermera del lote."""

    success_flag: bool = Field(default=False, alias="SuccessFlag")
    errors: Items[TransactionError] = Field(default_factory=list, alias="Errors")
    request: ManageNurseListRequest | None = Field(default=None, alias="ManageNurseListRequest")


class ManageNurseListRetrieveResponseMessage(RetrieveResponseMessage):
    responses: Items[ManageNurseListResponse] = Field(default_factory=list, alias="ManageNurseListResponses")
