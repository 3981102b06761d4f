"""Configuración del cliente.

Por qué aquí:
- Las variables `NURSYS_*` se leen en un solo sitio (pydantic-settings).
- El cliente en sí no lee el entorno: recibe URL, credenciales y transporte
  explícitos. Esta clase solo es una forma cómoda de obtenerlos.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from dotenv import set_key
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_env_file() -> Path:
    """`.env` por usuario, dentro del directorio de configuración de la plataforma."""

    return Path(typer.get_app_dir("nursys")) / ".env"


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Añade o reemplaza claves en el `.env` del usuario; conserva el resto."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(mode=0o600, exist_ok=True)
    for key, value in sorted(values.items()):
        if value is not None:
            set_key(env_path, key, value, quote_mode="always")
    # Contiene la contraseña de la API.
    if not sys.platform.startswith("win"):
        env_path.chmod(0o600)
    return env_path


class NursysSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - `SecretStr` evita que la contraseña aparezca en reprs y logs.
    """

    model_config = SettingsConfigDict(
        env_prefix="NURSYS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str | None = Field(
        default=None,
        description="URL base de la API de Nursys asignada a la institución.",
    )
    username: str | None = Field(
        default=None,
        description="Usuario de API (cabecera `username`).",
    )
    password: SecretStr | None = Field(
        default=None,
        description="Contraseña de API (cabecera `password`).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout del transporte (segundos). Sin valor: espera ilimitada.",
    )
    user_agent: str = Field(
        default="nursys-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    def missing_credentials(self) -> list[str]:
        """Nombres de las variables obligatorias que faltan."""

        missing: list[str] = []
        if not self.base_url:
            missing.append("NURSYS_BASE_URL")
        if not self.username:
            missing.append("NURSYS_USERNAME")
        if self.password is None or not self.password.get_secret_value():
            missing.append("NURSYS_PASSWORD")
        return missing
