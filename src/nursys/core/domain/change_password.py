"""Mensajes de Change Password (cambio de la contraseña de API de la institución)."""

from __future__ import annotations

from pydantic import Field

from nursys.core.domain.models import NursysModel, SubmitResponseMessage


class ChangePasswordSubmitRequestMessage(NursysModel):
    new_password: str = Field(..., alias="NewPassword")


class ChangePasswordSubmitResponseMessage(SubmitResponseMessage):
    """Nursys aplica sus reglas de contraseña y reporta el rechazo en la transacción."""
