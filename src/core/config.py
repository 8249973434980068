"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El cliente IOTHub lee endpoint/token/límites de forma consistente.

La CLI solo lleva opciones del mensaje (-v, -H, filename); el *adónde* se
envía vive aquí.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Igual que MAX_IOT_MSG_SIZE del servicio IOTHub.
MAX_IOT_MSG_SIZE = 256 * 1024


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "iotsend"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "iotsend"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "iotsend"
    return Path.home() / ".config" / "iotsend"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="IOTSEND_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    endpoint_url: str | None = Field(
        default=None,
        description="URL de ingesta del IOTHub que recibe los mensajes.",
    )
    api_token: str | None = Field(
        default=None,
        description="Token Bearer para el endpoint IOTHub (opcional).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="iotsend/0.1",
        min_length=1,
        description="User-Agent enviado con cada mensaje.",
    )
    max_message_size: int = Field(
        default=MAX_IOT_MSG_SIZE,
        ge=1,
        description="Tamaño máximo del payload en bytes; lo que exceda se trunca.",
    )
    chunk_size: int = Field(
        default=64 * 1024,
        ge=1,
        description="Tamaño de lectura al hacer streaming del payload.",
    )
