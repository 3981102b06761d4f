"""Mensajes de Nurse Lookup.

Devuelve toda la información pública de licencias y disciplina/órdenes finales
de las enfermeras inscritas en la lista de la institución.

Combinaciones válidas en `NurseLookupRequest`:
- jurisdicción + tipo de licencia + número de licencia
- jurisdicción + tipo de licencia + NCSBN ID
- jurisdicción + NCSBN ID
- tipo de licencia + NCSBN ID
- NCSBN ID
"""

from __future__ import annotations

from pydantic import Field

from nursys.core.domain.constants import LicenseType
from nursys.core.domain.models import (
    Items,
    NursysModel,
    RetrieveResponseMessage,
    SubmitResponseMessage,
    TransactionError,
)
from nursys.core.domain.timestamps import Timestamp


class NurseLookupRequest(NursysModel):
    jurisdiction_abbreviation: str | None = Field(default=None, alias="JurisdictionAbbreviation")
    license_number: str | None = Field(default=None, alias="LicenseNumber")
    license_type: LicenseType | str | None = Field(default=None, alias="LicenseType")
    ncsbn_id: str | None = Field(default=None, alias="NcsbnId")
    record_id: str | None = Field(default=None, alias="RecordId")


class NurseLookupSubmitRequestMessage(NursysModel):
    requests: list[NurseLookupRequest] = Field(default_factory=list, alias="NurseLookupRequests")


class NurseLookupSubmitResponseMessage(SubmitResponseMessage):
    pass


class NurseLookupBasisForAction(NursysModel):
    code: str = Field(default="", alias="BasisForActionCode")
    description: str = Field(default="", alias="BasisForActionDescription")


class NurseLookupAction(NursysModel):
    """Acción NPDB de una orden disciplinaria (inicial o revisión)."""

    action_date: Timestamp | None = Field(default=None, alias="ActionDate")
    action_code: str = Field(default="", alias="ActionCode")
    action_description: str = Field(default="", alias="ActionDescription")
    stayed: bool = Field(default=False, alias="ActionStayedFlag")
    start_date: Timestamp | None = Field(default=None, alias="StartDate")
    end_date: Timestamp | None = Field(default=None, alias="EndDate")
    duration: str | None = Field(
        default=None,
        alias="Duration",
        description="Indefinite/Unspecified, Permanent o Specified.",
    )
    automatic_reinstatement: str | None = Field(
        default=None,
        alias="AutomaticReinstatement",
        description="No, Yes o Yes With Conditions.",
    )


class NurseLookupDocument(NursysModel):
    """Documento de una orden; `document_id` es la entrada de Retrieve Documents."""

    action_date: Timestamp | None = Field(default=None, alias="ActionDate")
    document_id: str = Field(default="", alias="DocumentId")
    document_name: str = Field(default="", alias="DocumentName")


class NurseLookupRevisionReport(NursysModel):
    revision_report_date: Timestamp | None = Field(default=None, alias="RevisionReportDate")
    actions: Items[NurseLookupAction] = Field(default_factory=list, alias="NurseLookupRevisionActions")
    documents: Items[NurseLookupDocument] = Field(default_factory=list, alias="NurseLookupRevisionActionDocuments")


class NurseLookupDiscipline(NursysModel):
    jurisdiction_abbreviation: str = Field(default="", alias="JurisdictionAbbreviation")
    jurisdiction: str = Field(default="", alias="Jurisdiction")
    date_action_was_taken: Timestamp | None = Field(default=None, alias="DateActionWasTaken")
    against_privilege_to_practice: bool = Field(
        default=False,
        alias="AgainstPrivilegeToPracticeFlag",
        description="La orden afecta al Privilege To Practice (Nurse Licensure Compact).",
    )
    basis_for_actions: Items[NurseLookupBasisForAction] = Field(
        default_factory=list, alias="NurseLookupBasisForActions"
    )
    initial_actions: Items[NurseLookupAction] = Field(default_factory=list, alias="NurseLookupInitialActions")
    initial_action_documents: Items[NurseLookupDocument] = Field(
        default_factory=list, alias="NurseLookupInitialActionDocuments"
    )
    revision_reports: Items[NurseLookupRevisionReport] = Field(
        default_factory=list, alias="NurseLookupRevisionReports"
    )


class NurseLookupNotification(NursysModel):
    jurisdiction_abbreviation: str = Field(default="", alias="JurisdictionAbbreviation")
    jurisdiction: str = Field(default="", alias="Jurisdiction")
    notification_date: Timestamp | None = Field(default=None, alias="NotificationDate")
    notification_message: str = Field(default="", alias="NotificationMessage")
    documents: Items[NurseLookupDocument] = Field(default_factory=list, alias="NotificationDocuments")


class NurseLookupAdvancedPractice(NursysModel):
    focus_specialty: str = Field(default="", alias="FocusSpecialty")
    prescription_authority: str = Field(default="", alias="PrescriptionAuthority")
    certification_expiration_date: Timestamp | None = Field(default=None, alias="CertificationExpirationDate")
    focus_specialty_expiration_date: Timestamp | None = Field(default=None, alias="FocusSpecialtyExpirationDate")


class NurseLookupLicense(NursysModel):
    """Licencia encontrada para una enfermera.

    `messages` puede traer avisos importantes sobre la licencia: conviene
    revisarlos siempre.
    """

    last_name: str = Field(default="", alias="LastName")
    first_name: str = Field(default="", alias="FirstName")
    license_type: str = Field(default="", alias="LicenseType")
    jurisdiction_abbreviation: str = Field(default="", alias="JurisdictionAbbreviation")
    jurisdiction: str = Field(default="", alias="Jurisdiction")
    license_number: str = Field(default="", alias="LicenseNumber")
    active: str | None = Field(default=None, alias="Active")
    license_status: str | None = Field(default=None, alias="LicenseStatus")
    # Fechas de licencia: llegan como texto libre, no pasan por el codec.
    license_original_date: str | None = Field(default=None, alias="LicenseOriginalDate")
    license_expiration_date: str | None = Field(default=None, alias="LicenseExpirationDate")
    compact_status: str | None = Field(default=None, alias="CompactStatus")
    messages: Items[str] = Field(default_factory=list, alias="Messages")
    disciplines: Items[NurseLookupDiscipline] = Field(default_factory=list, alias="NurseLookupDisciplines")
    notifications: Items[NurseLookupNotification] = Field(default_factory=list, alias="NurseLookupNotifications")
    advanced_practices: Items[NurseLookupAdvancedPractice] = Field(
        default_factory=list, alias="NurseLookupAdvancedPractices"
    )


class AuthorizationToPractice(NursysModel):
    state_abbreviation: str = Field(default="", alias="StateAbbreviation")
    state_description: str = Field(default="", alias="StateDescription")
    code: str = Field(default="", alias="AuthorizationToPracticeCode")
    description: str = Field(default="", alias="AuthorizationToPracticeDescription")
    narrative: str = Field(default="", alias="AuthorizationToPracticeNarrative")


class NurseLookupResponse(NursysModel):
    """Resultado individual por enfermera consultada."""

    success_flag: bool = Field(default=False, alias="SuccessFlag")
    errors: Items[TransactionError] = Field(default_factory=list, alias="Errors")
    request: NurseLookupRequest | None = Field(default=None, alias="NurseLookupRequest")
    first_name: str = Field(default="", alias="FirstName")
    last_name: str = Field(default="", alias="LastName")
    ncsbn_id: str | None = Field(default=None, alias="NcsbnId")
    messages: Items[str] = Field(default_factory=list, alias="Messages")
    licenses: Items[NurseLookupLicense] = Field(default_factory=list, alias="NurseLookupLicenses")
    rn_authorizations_to_practice: Items[AuthorizationToPractice] = Field(
        default_factory=list, alias="NurseLookupRNAuthorizationsToPractice"
    )
    pn_authorizations_to_practice: Items[AuthorizationToPractice] = Field(
        default_factory=list, alias="NurseLookupPNAuthorizationsToPractice"
    )


class NurseLookupRetrieveResponseMessage(RetrieveResponseMessage):
    responses: Items[NurseLookupResponse] = Field(default_factory=list, alias="NurseLookupResponses")
