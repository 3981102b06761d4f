"""Cliente asíncrono tipado para la API REST de Nursys e-Notify."""

from nursys.adapters.http_client import EndpointInvoker, build_async_client
from nursys.adapters.nursys_client import NursysClient
from nursys.core.config import NursysSettings
from nursys.core.domain.change_password import (
    ChangePasswordSubmitRequestMessage,
    ChangePasswordSubmitResponseMessage,
)
from nursys.core.domain.constants import LicenseType, SubmissionActionCode
from nursys.core.domain.manage_nurse_list import (
    ManageNurseListRequest,
    ManageNurseListResponse,
    ManageNurseListRetrieveResponseMessage,
    ManageNurseListSubmitRequestMessage,
    ManageNurseListSubmitResponseMessage,
)
from nursys.core.domain.models import Transaction, TransactionError
from nursys.core.domain.notification_lookup import (
    NotificationLookupResponse,
    NotificationLookupRetrieveResponseMessage,
    NotificationLookupSubmitRequestMessage,
    NotificationLookupSubmitResponseMessage,
)
from nursys.core.domain.nurse_lookup import (
    NurseLookupRequest,
    NurseLookupResponse,
    NurseLookupRetrieveResponseMessage,
    NurseLookupSubmitRequestMessage,
    NurseLookupSubmitResponseMessage,
)
from nursys.core.domain.retrieve_documents import (
    RetrieveDocumentResponse,
    RetrieveDocumentsRetrieveResponseMessage,
)
from nursys.core.domain.timestamps import (
    Timestamp,
    TimestampDecodeError,
    format_timestamp,
    parse_timestamp,
)
from nursys.core.errors import (
    ContextError,
    DecodingError,
    EncodingError,
    NursysError,
    RemoteError,
    RequestConstructionError,
    TransportError,
)
from nursys.core.interfaces.client import NursysAPI

__all__ = [
    "ChangePasswordSubmitRequestMessage",
    "ChangePasswordSubmitResponseMessage",
    "ContextError",
    "DecodingError",
    "EncodingError",
    "EndpointInvoker",
    "LicenseType",
    "ManageNurseListRequest",
    "ManageNurseListResponse",
    "ManageNurseListRetrieveResponseMessage",
    "ManageNurseListSubmitRequestMessage",
    "ManageNurseListSubmitResponseMessage",
    "NotificationLookupResponse",
    "NotificationLookupRetrieveResponseMessage",
    "NotificationLookupSubmitRequestMessage",
    "NotificationLookupSubmitResponseMessage",
    "NurseLookupRequest",
    "NurseLookupResponse",
    "NurseLookupRetrieveResponseMessage",
    "NurseLookupSubmitRequestMessage",
    "NurseLookupSubmitResponseMessage",
    "NursysAPI",
    "NursysClient",
    "NursysError",
    "NursysSettings",
    "RemoteError",
    "RequestConstructionError",
    "RetrieveDocumentResponse",
    "RetrieveDocumentsRetrieveResponseMessage",
    "SubmissionActionCode",
    "Timestamp",
    "TimestampDecodeError",
    "Transaction",
    "TransactionError",
    "TransportError",
    "build_async_client",
    "format_timestamp",
    "parse_timestamp",
]
