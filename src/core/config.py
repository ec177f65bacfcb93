"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Idioma de salida, catálogo inicial y logging se leen de un único contrato.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


APP_DIR_NAME = "device-catalog"


def get_user_config_dir() -> Path:
    """`%APPDATA%` en Windows, `$XDG_CONFIG_HOME` (o `~/.config`) en el resto."""

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def save_user_setting(key: str, value: str, env_path: Path | None = None) -> Path:
    """Guarda `KEY=value` en un .env, sustituyendo la línea previa de esa clave.

    El resto de líneas (otras claves, comentarios) se conserva tal cual.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    lines = env_path.read_text(encoding="utf-8").splitlines() if env_path.exists() else []
    kept = [line for line in lines if line.split("=", 1)[0].strip().upper() != key.upper()]
    kept.append(f"{key}={value}")
    env_path.write_text("\n".join(kept) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="DEVICE_CATALOG_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma de `describe()` y de los tokens sí/no (en/es/ru).",
    )
    seed_defaults: bool = Field(
        default=True,
        description="Cargar los seis dispositivos de ejemplo al iniciar el menú.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner al iniciar el menú.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Fichero opcional donde duplicar los logs.",
    )
