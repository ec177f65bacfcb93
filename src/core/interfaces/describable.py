"""Contrato de presentación de dispositivos.

Por qué Protocol:
- La CLI solo necesita `describe()` y los datos de cabecera; no depende de la
  jerarquía concreta de modelos.
- Permite listar cualquier objeto que cumpla el contrato (p.ej. dobles de
  prueba) sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.language import Language


@runtime_checkable
class Describable(Protocol):
    """Contrato mínimo para listar una entidad."""

    kind: str
    brand: str
    model: str

    def describe(self, language: Language = Language.ENGLISH) -> str:
        """Resumen legible sin efectos secundarios."""

        ...
