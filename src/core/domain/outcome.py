"""Resultados explícitos para construcción y actualización.

Por qué existe:
- La CLI no debería depender de `try/except` para cada entrada del usuario:
  recibe un `Ok` o un `Err` y decide con `match`.
- Los modelos siguen lanzando `InvalidArgument` / `OutOfRange` para quien los
  use directamente; aquí solo se envuelven.

Solo se capturan errores de validación del dominio; cualquier otra excepción
se propaga.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from core.domain.errors import DeviceValidationError, InvalidArgument
from core.domain.models import DEVICE_TYPES, Device

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: DeviceValidationError

    @property
    def message(self) -> str:
        return str(self.error)


Outcome = Union[Ok[T], Err]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T]:
    """Ejecuta `func` y convierte un fallo de validación en `Err`."""

    try:
        return Ok(func(*args, **kwargs))
    except DeviceValidationError as exc:
        logger.debug("Validation rejected %s: %s", getattr(func, "__name__", func), exc)
        return Err(exc)


def create_device(kind: str, **fields: Any) -> Outcome[Device]:
    """Smart constructor: `kind` es `device`, `television` o `radio`."""

    device_type = DEVICE_TYPES.get(kind)
    if device_type is None:
        return Err(InvalidArgument(f"Unknown device kind: {kind!r}.", field_name="kind"))
    return attempt(device_type, **fields)


def apply_update(device: Device, operation: str, *args: Any) -> Outcome[Device]:
    """Invoca `device.<operation>(*args)` y devuelve el propio dispositivo.

    `operation` debe ser un método `update_*` de la variante; un nombre
    inexistente es un error de programación y lanza `AttributeError`.
    """

    method = getattr(device, operation)
    outcome = attempt(method, *args)
    if isinstance(outcome, Err):
        logger.info("Update %s on %s %s rejected: %s", operation, device.brand, device.model, outcome.message)
        return outcome
    return Ok(device)


def assign(device: Device, field_name: str, value: Any) -> Outcome[Device]:
    """Setter validado con resultado explícito (`device.<field_name> = value`)."""

    outcome = attempt(setattr, device, field_name, value)
    if isinstance(outcome, Err):
        logger.info("Assignment %s on %s %s rejected: %s", field_name, device.brand, device.model, outcome.message)
        return outcome
    return Ok(device)
