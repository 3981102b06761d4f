"""Taxonomía de errores del cliente.

Por qué una jerarquía propia:
- El llamador necesita distinguir "Nursys rechazó la petición (con cuerpo)"
  de "fallo de red/transporte" y de "respuesta indescifrable".
- Todas heredan de `NursysError` para poder capturar "cualquier fallo del
  cliente" en un único `except`.

La causa original (httpx, pydantic, asyncio) siempre queda encadenada en
`__cause__`.
"""

from __future__ import annotations


class NursysError(Exception):
    """Base de todos los errores del cliente."""


class EncodingError(NursysError):
    """El cuerpo de la petición no se puede serializar a JSON."""


class RequestConstructionError(NursysError):
    """No se pudo construir la petición HTTP (p.ej. URL mal formada)."""


class ContextError(NursysError):
    """La llamada terminó por cancelación o por vencimiento del plazo."""

    def __init__(self, message: str, *, deadline_exceeded: bool = False) -> None:
        super().__init__(message)
        self.deadline_exceeded = deadline_exceeded

    @property
    def cancelled(self) -> bool:
        return not self.deadline_exceeded


class RemoteError(NursysError):
    """Nursys respondió con un status distinto de 200/202.

    `body` conserva el texto crudo de la respuesta: suele traer un payload
    de diagnóstico estructurado que el llamador puede inspeccionar.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"nursys: request returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodingError(NursysError):
    """El cuerpo de una respuesta 200/202 no encaja con el tipo esperado."""


class TransportError(NursysError):
    """Fallo de red (DNS, conexión, TLS, protocolo)."""
