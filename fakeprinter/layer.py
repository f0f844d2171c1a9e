"""Print layer records and an ordered collection of them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator


class LayerError(IntEnum):
    """Outcome recorded for a printed layer."""

    SUCCESS = 0
    TIMED_OUT = 1
    TEMP_OUT_RANGE = 2


@dataclass
class Layer:
    """Settings and result of one printed layer."""

    error: LayerError = LayerError.SUCCESS
    layer_number: int = 0
    layer_height: float = 0.0
    material_type: str = ""
    extrusion_temp: int = 0
    print_speed: int = 0
    adhesion_quality: str = ""
    density: float = 0.0
    infill_pattern: str = ""
    shell_thickness: int = 0
    overhang_angle: int = 0
    cooling_fan_speed: int = 0
    retraction_settings: int = 0
    z_offset_adjustment: float = 0.0
    print_bed_temp: int = 0
    layer_time: str = ""
    filename: str = ""
    url_image: str = ""


class CompositeLayers:
    """An ordered collection of layers making up a print."""

    def __init__(self, layers: Iterable[Layer] = ()) -> None:
        self._layers: list[Layer] = list(layers)

    def check_valid_layer(self, layer: Layer) -> bool:
        """Return True when the layer was printed without error."""
        return layer.error == LayerError.SUCCESS

    def add_layer(self, layer: Layer) -> None:
        self._layers.append(layer)

    def is_empty(self) -> bool:
        return not self._layers

    @property
    def layers(self) -> list[Layer]:
        """A copy of the stored layers, in insertion order."""
        return list(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __repr__(self) -> str:
        return f"CompositeLayers({self._layers!r})"