"""Cliente de Nursys: una corrutina por endpoint.

Cada método es una especialización fina de `EndpointInvoker.invoke` con ruta,
método y tipos fijos. Implementa `nursys.core.interfaces.client.NursysAPI`.

Los POST son asíncronos en el servidor: devuelven un `TransactionId` y el
resultado se recupera más tarde con el `get_*_result` correspondiente. Este
cliente no hace polling; quien llama decide cuándo reintentar.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

import httpx

from nursys.adapters.http_client import EndpointInvoker, build_async_client
from nursys.core.config import NursysSettings
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
from nursys.core.interfaces.client import NursysAPI


class NursysClient(NursysAPI):
    """Cliente HTTP de la API de Nursys.

    Uso:

        async with NursysClient("https://api.example/", "acme", "secret") as client:
            tx = await client.nurse_lookup(request)
            ...
            result = await client.get_nurse_lookup_result(tx.transaction.transaction_id)
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        close_http_client: bool | None = None,
    ) -> None:
        self._invoker = EndpointInvoker(
            base_url,
            username,
            password,
            http_client=http_client,
            close_http_client=close_http_client,
        )

    @classmethod
    def from_settings(
        cls,
        settings: NursysSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "NursysClient":
        """Construye el cliente desde `NursysSettings` (variables `NURSYS_*`)."""

        settings = settings or NursysSettings()
        missing = settings.missing_credentials()
        if missing:
            raise ValueError(f"missing nursys configuration: {', '.join(missing)}")
        # `missing_credentials` ya garantiza que los tres están presentes.
        password = settings.password.get_secret_value() if settings.password is not None else ""
        return cls(
            settings.base_url or "",
            settings.username or "",
            password,
            http_client=http_client or build_async_client(settings),
            close_http_client=http_client is None,
        )

    def __repr__(self) -> str:
        return f"NursysClient({self._invoker!r})"

    async def __aenter__(self) -> "NursysClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._invoker.aclose()

    async def manage_nurse_list(
        self,
        request: ManageNurseListSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ManageNurseListSubmitResponseMessage:
        """Envía un lote de altas/actualizaciones/bajas de la lista de enfermeras."""

        return await self._invoker.invoke(
            "POST",
            "/managenurselist",
            request,
            ManageNurseListSubmitResponseMessage,
            timeout=timeout,
            cancel=cancel,
        )

    async def get_manage_nurse_list_result(
        self,
        tx_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ManageNurseListRetrieveResponseMessage:
        return await self._invoker.invoke(
            "GET",
            "/managenurselist",
            None,
            ManageNurseListRetrieveResponseMessage,
            params={"transactionId": tx_id},
            timeout=timeout,
            cancel=cancel,
        )

    async def change_password(
        self,
        request: ChangePasswordSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ChangePasswordSubmitResponseMessage:
        """Cambia la contraseña de API de la institución.

        Un rechazo por reglas de contraseña no es una excepción: llega como
        `transaction.success_flag == False` con el detalle en `transaction.errors`.
        """

        return await self._invoker.invoke(
            "POST",
            "/changepassword",
            request,
            ChangePasswordSubmitResponseMessage,
            timeout=timeout,
            cancel=cancel,
        )

    async def nurse_lookup(
        self,
        request: NurseLookupSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NurseLookupSubmitResponseMessage:
        return await self._invoker.invoke(
            "POST",
            "/nurselookup",
            request,
            NurseLookupSubmitResponseMessage,
            timeout=timeout,
            cancel=cancel,
        )

    async def get_nurse_lookup_result(
        self,
        tx_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NurseLookupRetrieveResponseMessage:
        return await self._invoker.invoke(
            "GET",
            "/nurselookup",
            None,
            NurseLookupRetrieveResponseMessage,
            params={"transactionId": tx_id},
            timeout=timeout,
            cancel=cancel,
        )

    async def notification_lookup(
        self,
        request: NotificationLookupSubmitRequestMessage,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NotificationLookupSubmitResponseMessage:
        return await self._invoker.invoke(
            "POST",
            "/notificationlookup",
            request,
            NotificationLookupSubmitResponseMessage,
            timeout=timeout,
            cancel=cancel,
        )

    async def get_notification_lookup_result(
        self,
        tx_id: str,
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> NotificationLookupRetrieveResponseMessage:
        return await self._invoker.invoke(
            "GET",
            "/notificationlookup",
            None,
            NotificationLookupRetrieveResponseMessage,
            params={"transactionId": tx_id},
            timeout=timeout,
            cancel=cancel,
        )

    async def retrieve_documents(
        self,
        document_ids: Sequence[str],
        *,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> RetrieveDocumentsRetrieveResponseMessage:
        """Descarga documentos por `DocumentId` (la API admite hasta cinco)."""

        return await self._invoker.invoke(
            "GET",
            "/retrievedocuments",
            None,
            RetrieveDocumentsRetrieveResponseMessage,
            # Nursys espera los ids separados por comas.
            params={"documentIds": ",".join(document_ids)},
            timeout=timeout,
            cancel=cancel,
        )
