"""Device catalog service.

The catalog is an ordered, caller-owned collection: the CLI creates one and
passes it around explicitly, so there is no process-wide list of devices.
Positions exposed to users are 1-based, matching the numbered listing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Iterator

from core.domain.language import Language
from core.domain.models import Device, RadioReceiver, Television

logger = logging.getLogger(__name__)


@dataclass
class DeviceCatalog:
    """Ordered list of devices with 1-based positional access."""

    devices: list[Device] = field(default_factory=list)

    @classmethod
    def from_devices(cls, devices: Iterable[Device]) -> "DeviceCatalog":
        return cls(devices=list(devices))

    def __len__(self) -> int:
        return len(self.devices)

    def __iter__(self) -> Iterator[Device]:
        return iter(self.devices)

    @property
    def is_empty(self) -> bool:
        return not self.devices

    def add(self, device: Device) -> int:
        """Append `device` and return its 1-based position."""

        self.devices.append(device)
        logger.info("Added %s %s %s at position %d", device.kind, device.brand, device.model, len(self.devices))
        return len(self.devices)

    def get(self, position: int) -> Device:
        return self.devices[self._index(position)]

    def remove(self, position: int) -> Device:
        device = self.devices.pop(self._index(position))
        logger.info("Removed %s %s from position %d", device.brand, device.model, position)
        return device

    def clear(self) -> None:
        logger.debug("Clearing catalog with %d devices", len(self.devices))
        self.devices.clear()

    def describe_all(self, language: Language = Language.ENGLISH) -> list[str]:
        """Numbered descriptions, one per device, in insertion order."""

        return [f"{n}. {device.describe(language)}" for n, device in enumerate(self.devices, start=1)]

    def _index(self, position: int) -> int:
        if position < 1 or position > len(self.devices):
            raise IndexError(f"Position {position} is outside 1..{len(self.devices)}.")
        return position - 1


def default_devices() -> list[Device]:
    """Seed devices shown when the menu starts."""

    return [
        Television(
            brand="Samsung", model="Q80", color="Black", price=Decimal(79999),
            screen_size_inches=55, resolution="4K", is_smart=True, panel_type="QLED",
        ),
        Television(
            brand="LG", model="C2", color="Gray", price=Decimal(119999),
            screen_size_inches=65, resolution="4K", is_smart=True, panel_type="OLED",
        ),
        Television(
            brand="Philips", model="PUS8507", color="Silver", price=Decimal(64999),
            screen_size_inches=50, resolution="4K", is_smart=True, panel_type="LED",
        ),
        RadioReceiver(
            brand="Sony", model="ICF-P36", color="Black", price=Decimal(1999),
            band="AM/FM", min_frequency_mhz=0.52, max_frequency_mhz=108.0, has_rds=False,
        ),
        RadioReceiver(
            brand="Panasonic", model="RF-2400D", color="Black", price=Decimal(3499),
            band="AM/FM", min_frequency_mhz=0.52, max_frequency_mhz=108.0, has_rds=False,
        ),
        RadioReceiver(
            brand="Sony", model="XDR-S61D", color="White", price=Decimal(8999),
            band="DAB", min_frequency_mhz=174.928, max_frequency_mhz=239.2, has_rds=True,
        ),
    ]
