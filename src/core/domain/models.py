"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- `validate_assignment=True` convierte cada asignación en un setter validado,
  así el constructor y las mutaciones comparten las mismas reglas.
- El campo `kind` actúa de discriminador: las tres entidades forman un
  conjunto cerrado de variantes (`AnyDevice`).

Nota:
- Los `ValidationError` de Pydantic nunca salen de aquí; se traducen al
  primer error de dominio (`InvalidArgument` / `OutOfRange`).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import (
    BaseModel,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.config import ConfigDict

from core.domain.errors import DeviceValidationError, InvalidArgument
from core.domain.language import Language
from core.domain.validators import normalize_band, validate_non_empty, validate_range

PRICE_MIN = Decimal(0)
PRICE_MAX = Decimal(1_000_000)

SCREEN_SIZE_MIN = 10
SCREEN_SIZE_MAX = 120

FREQUENCY_MIN_MHZ = 0.05
FREQUENCY_MAX_MHZ = 300.0


def _domain_error(exc: ValidationError) -> DeviceValidationError:
    """Primer error de `exc` expresado como error de dominio."""

    first = exc.errors()[0]
    cause = first.get("ctx", {}).get("error")
    if isinstance(cause, DeviceValidationError):
        return cause
    field_name = ".".join(str(part) for part in first["loc"]) or None
    message = f"{field_name}: {first['msg']}" if field_name else first["msg"]
    return InvalidArgument(message, field_name=field_name)


def format_price(price: Decimal) -> str:
    # Decimal siempre usa "." como separador; "f" evita la notación 1E+6.
    return format(price, "f")


def format_mhz(value: float) -> str:
    return format(value, ".10g")


class Device(BaseModel):
    """Dispositivo genérico: marca, modelo, color y precio.

    Se construye completo (todo o nada) y solo muta por asignación o por los
    métodos `update_*`, que vuelven a validar.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    kind: Literal["device"] = Field(default="device", frozen=True)
    brand: str = Field(default="Generic", description="Fabricante.")
    model: str = Field(default="Model", description="Modelo comercial.")
    color: str = Field(default="Black", description="Color de la carcasa.")
    price: Decimal = Field(default=Decimal(0), description="Precio en [0; 1_000_000].")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _domain_error(exc) from None

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise _domain_error(exc) from None

    @field_validator("brand", "model", "color", mode="before")
    @classmethod
    def _non_empty(cls, value: Any, info: ValidationInfo) -> str:
        return validate_non_empty(value, info.field_name)

    @field_validator("price")
    @classmethod
    def _price_range(cls, value: Decimal) -> Decimal:
        return validate_range(value, PRICE_MIN, PRICE_MAX, "price")

    def get_brand(self) -> str:
        return self.brand

    def get_model(self) -> str:
        return self.model

    def get_color(self) -> str:
        return self.color

    def get_price(self) -> Decimal:
        return self.price

    def update_price(self, new_price: Decimal | int | float | str) -> None:
        self.price = new_price

    def update_color(self, new_color: str) -> None:
        self.color = new_color

    def describe(self, language: Language = Language.ENGLISH) -> str:
        """Resumen legible: marca, modelo, color y precio."""

        t = language.term
        return (
            f"{t('device')}: {self.brand} {self.model}, "
            f"{t('color')}: {self.color}, {t('price')}: {format_price(self.price)}"
        )


class Television(Device):
    """Televisor: añade diagonal, resolución, smart y tipo de panel."""

    kind: Literal["television"] = Field(default="television", frozen=True)
    model: str = Field(default="TV", description="Modelo comercial.")
    screen_size_inches: int = Field(default=32, description="Diagonal en [10; 120] pulgadas.")
    resolution: str = Field(default="1080p", description="p.ej. 1080p, 4K.")
    is_smart: bool = Field(default=True, description="Smart TV.")
    panel_type: str = Field(default="LED", description="LED, OLED, QLED...")

    @field_validator("resolution", "panel_type", mode="before")
    @classmethod
    def _tv_non_empty(cls, value: Any, info: ValidationInfo) -> str:
        return validate_non_empty(value, info.field_name)

    @field_validator("screen_size_inches")
    @classmethod
    def _screen_size_range(cls, value: int) -> int:
        return validate_range(value, SCREEN_SIZE_MIN, SCREEN_SIZE_MAX, "screen_size_inches")

    def get_screen_size_inches(self) -> int:
        return self.screen_size_inches

    def get_resolution(self) -> str:
        return self.resolution

    def get_is_smart(self) -> bool:
        return self.is_smart

    def get_panel_type(self) -> str:
        return self.panel_type

    def update_resolution(self, new_resolution: str) -> None:
        self.resolution = new_resolution

    def update_screen_size(self, new_size: int) -> None:
        self.screen_size_inches = new_size

    def describe(self, language: Language = Language.ENGLISH) -> str:
        t = language.term
        return (
            f"{t('television')}: {self.brand} {self.model}, "
            f"{self.screen_size_inches}\" {self.resolution}, "
            f"{t('panel')}: {self.panel_type}, smart: {language.yes_no(self.is_smart)}, "
            f"{t('color')}: {self.color}, {t('price')}: {format_price(self.price)}"
        )


class RadioReceiver(Device):
    """Radiorreceptor: banda, rango de frecuencias y RDS.

    Invariante cruzado: `max_frequency_mhz > min_frequency_mhz` tras construir
    y tras `update_frequency_range`. Los setters individuales de frecuencia
    solo validan el rango.
    """

    kind: Literal["radio"] = Field(default="radio", frozen=True)
    model: str = Field(default="Radio", description="Modelo comercial.")
    band: str = Field(default="FM", description="AM, FM, AM/FM o DAB.")
    min_frequency_mhz: float = Field(default=87.5, description="MHz en [0.05; 300].")
    max_frequency_mhz: float = Field(default=108.0, description="MHz en [0.05; 300].")
    has_rds: bool = Field(default=True, description="Radio Data System.")

    @field_validator("band", mode="before")
    @classmethod
    def _band(cls, value: Any) -> str:
        return normalize_band(value)

    @field_validator("min_frequency_mhz", "max_frequency_mhz")
    @classmethod
    def _frequency_range(cls, value: float, info: ValidationInfo) -> float:
        return validate_range(value, FREQUENCY_MIN_MHZ, FREQUENCY_MAX_MHZ, info.field_name)

    def model_post_init(self, __context: Any) -> None:
        # Solo en construcción: la asignación individual no pasa por aquí.
        self._check_frequency_order()

    def _check_frequency_order(self) -> None:
        if self.max_frequency_mhz <= self.min_frequency_mhz:
            raise InvalidArgument(
                "max_frequency_mhz must be greater than min_frequency_mhz.",
                field_name="max_frequency_mhz",
            )

    def get_band(self) -> str:
        return self.band

    def get_min_frequency_mhz(self) -> float:
        return self.min_frequency_mhz

    def get_max_frequency_mhz(self) -> float:
        return self.max_frequency_mhz

    def get_has_rds(self) -> bool:
        return self.has_rds

    def update_band(self, new_band: str) -> None:
        self.band = new_band

    def update_frequency_range(self, min_mhz: float, max_mhz: float) -> None:
        """Asigna ambas frecuencias y después comprueba el orden.

        Si el orden falla, los valores nuevos quedan aplicados (no hay
        rollback) y se lanza `InvalidArgument`.
        """

        self.min_frequency_mhz = min_mhz
        self.max_frequency_mhz = max_mhz
        self._check_frequency_order()

    def describe(self, language: Language = Language.ENGLISH) -> str:
        t = language.term
        return (
            f"{t('radio')}: {self.brand} {self.model}, {t('band')}: {self.band}, "
            f"{format_mhz(self.min_frequency_mhz)}-{format_mhz(self.max_frequency_mhz)} {t('mhz')}, "
            f"RDS: {language.yes_no(self.has_rds)}, "
            f"{t('color')}: {self.color}, {t('price')}: {format_price(self.price)}"
        )


AnyDevice = Annotated[Union[Device, Television, RadioReceiver], Field(discriminator="kind")]

DEVICE_TYPES: dict[str, type[Device]] = {
    "device": Device,
    "television": Television,
    "radio": RadioReceiver,
}

_ANY_DEVICE: TypeAdapter[Any] = TypeAdapter(AnyDevice)


def parse_device(payload: Mapping[str, Any]) -> Device:
    """Construye la variante indicada por `payload["kind"]`."""

    try:
        return _ANY_DEVICE.validate_python(dict(payload))
    except ValidationError as exc:
        raise _domain_error(exc) from None
