"""Codec de timestamps flexibles.

Por qué existe:
- Nursys no emite fechas de forma uniforme: a veces RFC 3339 estricto, a veces
  con espacio en lugar de `T`, a veces sin offset.
- Siempre serializamos en un único formato canónico
  (`YYYY-MM-DDTHH:MM:SS.ffffff±HH:MM`), sin intentar imitar el formato de entrada.

Reglas de decodificación:
- Se prueban los formatos en un orden fijo y gana el primero que encaja.
- No hay heurísticas: o el patrón exacto encaja o se pasa al siguiente.
- No se "desescapan" artefactos de transporte (p.ej. `%3A`).
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema

_DATE_TIME = r"(?P<date>\d{4}-\d{2}-\d{2})[{sep}](?P<time>\d{2}:\d{2}:\d{2})(?:\.(?P<fraction>\d+))?"
_OFFSET = r"(?P<offset>Z|[+-]\d{2}:\d{2})"


def _pattern(sep: str, offset: str) -> re.Pattern[str]:
    # ASCII: `\d` no debe aceptar dígitos de otros alfabetos.
    return re.compile(_DATE_TIME.replace("{sep}", sep) + offset, re.ASCII)


# Orden fijo: el primero que encaja gana.
TIMESTAMP_FORMATS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("rfc3339", _pattern("T", _OFFSET)),
    ("rfc3339-space", _pattern(" ", _OFFSET + "?")),
    ("local", _pattern("T", "")),
    ("local-offset", _pattern("T", r"(?P<offset>[+-]\d{2}:\d{2})")),
)


class TimestampDecodeError(ValueError):
    """El texto no encaja en ninguno de los formatos aceptados."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid time format: {raw!r}")
        self.raw = raw


def _parse_offset(value: str | None) -> timezone:
    if value is None or value == "Z":
        return timezone.utc
    sign = -1 if value[0] == "-" else 1
    hours, minutes = int(value[1:3]), int(value[4:6])
    if minutes >= 60:
        raise ValueError(f"offset minutes out of range: {value}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _build(match: re.Match[str]) -> datetime:
    year, month, day = (int(p) for p in match.group("date").split("-"))
    hour, minute, second = (int(p) for p in match.group("time").split(":"))
    fraction = match.group("fraction") or ""
    # Más de 6 dígitos (Nursys manda hasta 7) se trunca a microsegundos.
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    offset = match.groupdict().get("offset")
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=_parse_offset(offset))


def parse_timestamp(raw: str) -> datetime:
    """Decodifica `raw` probando los formatos en orden de prioridad."""

    for _name, pattern in TIMESTAMP_FORMATS:
        match = pattern.fullmatch(raw)
        if match is None:
            continue
        try:
            return _build(match)
        except ValueError:
            # Encaja sintácticamente pero la fecha/offset no existe.
            continue
    raise TimestampDecodeError(raw)


def format_timestamp(value: datetime) -> str:
    """Formato canónico: microsegundos + offset numérico explícito."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    offset = value.utcoffset() or timedelta(0)
    if offset % timedelta(minutes=1):
        # `±HH:MM` no admite segundos: se redondea el offset hacia cero
        # conservando el instante.
        minutes = int(offset.total_seconds() / 60)
        value = value.astimezone(timezone(timedelta(minutes=minutes)))
    return value.isoformat(timespec="microseconds")


def _coerce(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_timestamp(value)
    # En el cable solo valen strings; un número no es un epoch.
    raise TimestampDecodeError(repr(value))


Timestamp = Annotated[
    datetime,
    BeforeValidator(_coerce),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "date-time"}),
]
"""`datetime` que entra/sale de JSON a través del codec flexible."""
