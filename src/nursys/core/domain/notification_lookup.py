"""Mensajes de Notification Lookup.

El cliente envía un rango de fechas y, tras el procesamiento, recupera los
cambios de estado de las licencias inscritas en ese rango.

Reglas de la API (no se validan aquí, las valida Nursys):
- la fecha de inicio debe ser anterior o igual a la de fin;
- ambas deben ser anteriores o iguales a la fecha actual.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from nursys.core.domain.models import Items, NursysModel, RetrieveResponseMessage, SubmitResponseMessage
from nursys.core.domain.timestamps import Timestamp


class NotificationLookupSubmitRequestMessage(NursysModel):
    """Rango de fechas a consultar; en el cable viaja como `YYYY-MM-DD`."""

    start_date: date = Field(..., alias="StartDate")
    end_date: date = Field(..., alias="EndDate")


class NotificationLookupSubmitResponseMessage(SubmitResponseMessage):
    pass


class NotificationLookupResponse(NursysModel):
    ncsbn_id: str | None = Field(default=None, alias="NcsbnId")
    jurisdiction_abbreviation: str = Field(default="", alias="JurisdictionAbbreviation")
    jurisdiction: str = Field(default="", alias="Jurisdiction")
    license_number: str = Field(default="", alias="LicenseNumber")
    license_type: str = Field(default="", alias="LicenseType")
    first_name: str = Field(default="", alias="FirstName")
    last_name: str = Field(default="", alias="LastName")
    record_id: str | None = Field(default=None, alias="RecordId")
    notification_date: Timestamp | None = Field(
        default=None,
        alias="NotificationDate",
        description="Fecha en que se reportó el cambio de estado.",
    )
    license_status_change: str | None = Field(default=None, alias="LicenseStatusChange")
    discipline_status_change: str | None = Field(default=None, alias="DisciplineStatusChange")
    discipline_status_change_other: str | None = Field(
        default=None,
        alias="DisciplineStatusChangeOther",
        description="Cambios que afectan a licencias de la enfermera que no están inscritas.",
    )


class NotificationLookupRetrieveResponseMessage(RetrieveResponseMessage):
    responses: Items[NotificationLookupResponse] = Field(default_factory=list, alias="NotificationLookupResponses")
