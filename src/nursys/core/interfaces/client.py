"""Contrato del cliente de Nursys.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP por un doble de prueba en el código que
  lo consume, sin acoplarse a la implementación concreta.

Servicios de la API:
1. Manage Nurse List: añadir, actualizar y quitar enfermeras de la lista.
2. Change Password: cambiar la contraseña de API de la institución.
3. Nurse Lookup: información de licencias y disciplina de las enfermeras inscritas.
4. Notification Lookup: cambios de estado de las licencias inscritas.
5. Retrieve Documents: documentos asociados a licencias y órdenes.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, Sequence, runtime_checkable

from nursys.core.domain.change_password import (
    ChangePasswordSubmitRequestMessage,
    ChangePasswordSubmitResponseMessage,
)
from nursys.core.domain.manage_nurse_list import (
    ManageNurseListRetrieveResponseMessage,
    ManageNurseListSubmitRequestMessage,
    ManageNurseListSubmitResponseMessage,
)
from nursys.core.domain.notification_lookup import (
    NotificationLookupRetrieveResponseMessage,
    NotificationLookupSubmitRequestMessage,
    NotificationLookupSubmitResponseMessage,
)
from nursys.core.domain.nurse_lookup import (
    NurseLookupRetrieveResponseMessage,
    NurseLookupSubmitRequestMessage,
    NurseLookupSubmitResponseMessage,
)
from nursys.core.domain.retrieve_documents import RetrieveDocumentsRetrieveResponseMessage


@runtime_checkable
class NursysAPI(Protocol):
    """Una corrutina por endpoint.

    Reglas de diseño:
    - Todas aceptan `timeout` (segundos) y `cancel` (un `asyncio.Event`).
    - Los POST son asíncronos en el servidor: devuelven una transacción y el
      resultado se recupera después con el `get_*_result` correspondiente.
    """

    async def manage_nurse_list(
        self,
        request: ManageNurseListSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ManageNurseListSubmitResponseMessage: ...

    async def get_manage_nurse_list_result(
        self,
        tx_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ManageNurseListRetrieveResponseMessage: ...

    async def change_password(
        self,
        request: ChangePasswordSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ChangePasswordSubmitResponseMessage: ...

    async def nurse_lookup(
        self,
        request: NurseLookupSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NurseLookupSubmitResponseMessage: ...

    async def get_nurse_lookup_result(
        self,
        tx_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NurseLookupRetrieveResponseMessage: ...

    async def notification_lookup(
        self,
        request: NotificationLookupSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NotificationLookupSubmitResponseMessage: ...

    async def get_notification_lookup_result(
        self,
        tx_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NotificationLookupRetrieveResponseMessage: ...

    async def retrieve_documents(
        self,
        document_ids: Sequence[str],
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> RetrieveDocumentsRetrieveResponseMessage: ...
