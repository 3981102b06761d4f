"""Pipeline de invocación sobre httpx.

Por qué un wrapper:
- Estandariza serialización, cabeceras de autenticación, clasificación de
  status y cancelación para todos los endpoints.
- Facilita testeo: el `httpx.AsyncClient` se inyecta, así que los tests usan
  `httpx.MockTransport` sin tocar estado global.

Contrato de `EndpointInvoker.invoke`:
1. Serializa el cuerpo a JSON (`EncodingError` si no se puede).
2. Construye la petición contra `base_url + path` (`RequestConstructionError`
   si la URL es inválida) y falla sin tocar la red si ya está cancelada.
3. Añade `Content-Type` y las cabeceras no estándar `username`/`password`.
4. Envía. Es el único punto de espera: compite con el plazo (`timeout`) y con
   el token de cancelación (`cancel`); el primero que termine gana
   (`ContextError`).
5. 200/202: decodifica en `response_type` (`DecodingError` si no encaja).
   Cualquier otro status: `RemoteError` con el cuerpo crudo.
6. La respuesta se cierra siempre.
7. Fallos de red: `TransportError`.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Awaitable, Mapping, TypeVar, overload

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from nursys.core.config import NursysSettings
from nursys.core.errors import (
    ContextError,
    DecodingError,
    EncodingError,
    RemoteError,
    RequestConstructionError,
    TransportError,
)

logger = logging.getLogger(__name__)

# Cabeceras no estándar en las que Nursys espera las credenciales.
HEADER_USERNAME = "username"
HEADER_PASSWORD = "password"

SUCCESS_STATUSES = frozenset({200, 202})

T = TypeVar("T")


def build_async_client(
    settings: NursysSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` a partir de la configuración.

    Sin `http_timeout_seconds` no hay timeout de transporte: el único plazo es
    el que fije quien llama en cada invocación.
    """

    settings = settings or NursysSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
    )


def encode_body(body: Any) -> bytes | None:
    """Serializa el cuerpo de la petición.

    Los modelos se vuelcan por alias y sin los campos en `None` (equivale al
    `omitempty` de la API). `None` significa "sin cuerpo".
    """

    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        return to_json(body, by_alias=True)
    except PydanticSerializationError as exc:
        raise EncodingError(f"cannot encode request body: {exc}") from exc


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def decode_body(raw: bytes, response_type: type[T]) -> T:
    try:
        return _adapter(response_type).validate_json(raw)
    except ValidationError as exc:
        raise DecodingError(f"cannot decode response into {response_type!r}: {exc}") from exc


class EndpointInvoker:
    """Invoca endpoints de Nursys. Sin estado entre llamadas.

    La configuración (URL, credenciales, transporte) es de solo lectura tras
    construirse, así que una instancia se puede compartir entre corrutinas.
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
        self._base_url = base_url.rstrip("/")
        self._username = username
        self._password = password
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(None))
        self._close_http = (http_client is None) if close_http_client is None else close_http_client

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r}, username={self._username!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._close_http:
            await self._http.aclose()

    def _headers(self) -> dict[str, str | bytes]:
        # httpx codifica cabeceras `str` como ASCII; las credenciales van en UTF-8.
        return {
            "Content-Type": "application/json",
            HEADER_USERNAME: self._username.encode("utf-8"),
            HEADER_PASSWORD: self._password.encode("utf-8"),
        }

    def _build_request(
        self,
        method: str,
        path: str,
        content: bytes | None,
        params: Mapping[str, str] | None,
    ) -> httpx.Request:
        try:
            request = self._http.build_request(
                method,
                self._base_url + path,
                params=params,
                content=content,
                headers=self._headers(),
            )
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise RequestConstructionError(f"cannot build request for {self._base_url + path!r}: {exc}") from exc
        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise RequestConstructionError(f"invalid url {str(request.url)!r}")
        return request

    @overload
    async def invoke(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: None = None,
        *,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None: ...

    @overload
    async def invoke(
        self,
        method: str,
        path: str,
        body: Any,
        response_type: type[T],
        *,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> T: ...

    async def invoke(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: type[Any] | None = None,
        *,
        params: Mapping[str, str] | None = None,
        timeout: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> Any:
        """Envía `body` a `path` con `method` y decodifica la respuesta.

        `timeout` es el plazo total de la llamada en segundos (`None`: sin
        plazo). `cancel` es un token: si se activa, la llamada termina en
        cuanto puede con `ContextError`. Cancelar la tarea que espera propaga
        `asyncio.CancelledError` sin envolver.
        """

        content = encode_body(body)
        request = self._build_request(method, path, content, params)

        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout
        if cancel is not None and cancel.is_set():
            raise ContextError("nursys: request cancelled before dispatch")
        if deadline is not None and timeout <= 0:
            raise ContextError("nursys: deadline exceeded before dispatch", deadline_exceeded=True)

        started = loop.time()
        response: httpx.Response = await self._guard(self._http.send(request, stream=True), deadline, cancel)
        try:
            logger.debug(
                "nursys %s %s -> %d (%.0f ms)",
                method,
                request.url.path,
                response.status_code,
                (loop.time() - started) * 1000,
            )
            if response.status_code not in SUCCESS_STATUSES:
                raise RemoteError(response.status_code, await self._read_error_body(response, deadline, cancel))
            if response_type is None:
                return None
            raw = await self._guard(response.aread(), deadline, cancel)
            return decode_body(raw, response_type)
        finally:
            await response.aclose()

    async def _read_error_body(
        self,
        response: httpx.Response,
        deadline: float | None,
        cancel: asyncio.Event | None,
    ) -> str:
        # Best-effort: si falla la lectura, el error principal sigue siendo el status.
        try:
            raw = await self._guard(response.aread(), deadline, cancel)
        except (TransportError, ContextError):
            return ""
        return raw.decode(response.encoding or "utf-8", errors="replace")

    async def _guard(
        self,
        operation: Awaitable[T],
        deadline: float | None,
        cancel: asyncio.Event | None,
    ) -> T:
        """Espera `operation` compitiendo con el plazo y el token de cancelación."""

        task = asyncio.ensure_future(operation)
        watchers: set[asyncio.Future[Any]] = {task}
        stopper: asyncio.Future[Any] | None = None
        if cancel is not None:
            stopper = asyncio.ensure_future(cancel.wait())
            watchers.add(stopper)

        remaining = None
        if deadline is not None:
            remaining = max(0.0, deadline - asyncio.get_running_loop().time())

        try:
            done, _ = await asyncio.wait(watchers, timeout=remaining, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for watcher in watchers:
                if not watcher.done():
                    watcher.cancel()

        if task in done:
            try:
                return task.result()
            except httpx.HTTPError as exc:
                raise TransportError(f"nursys: {type(exc).__name__}: {exc}") from exc

        # La operación quedó cancelada; esperamos a que libere la conexión.
        await asyncio.gather(task, return_exceptions=True)
        if not task.cancelled() and task.exception() is None:
            late = task.result()
            if isinstance(late, httpx.Response):
                await late.aclose()

        if stopper is not None and stopper in done:
            raise ContextError("nursys: request cancelled") from asyncio.CancelledError()
        raise ContextError("nursys: deadline exceeded", deadline_exceeded=True) from asyncio.TimeoutError()
