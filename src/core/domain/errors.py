"""Errores del dominio.

Por qué dos tipos:
- `InvalidArgument` cubre valores mal formados (texto vacío, banda desconocida,
  orden de frecuencias).
- `OutOfRange` cubre números fuera de su intervalo cerrado.

Ambos heredan de `ValueError` para que el código que ya captura errores de
valor siga funcionando.
"""

from __future__ import annotations

from typing import Any


class DeviceValidationError(ValueError):
    """Base de todos los fallos de validación de entidades."""

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class InvalidArgument(DeviceValidationError):
    """Valor vacío, fuera del conjunto permitido o combinación inválida."""


class OutOfRange(DeviceValidationError):
    """Valor numérico fuera de `[minimum; maximum]`."""

    def __init__(self, field_name: str, value: Any, minimum: Any, maximum: Any) -> None:
        super().__init__(
            f"{field_name} must be in range [{minimum}; {maximum}], got {value}.",
            field_name=field_name,
        )
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
