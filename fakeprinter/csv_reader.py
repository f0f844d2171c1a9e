"""Reading print layers from a CSV file."""

from __future__ import annotations

import logging
import re
from typing import Callable, Sequence

from .layer import CompositeLayers, Layer, LayerError

logger = logging.getLogger(__name__)

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring trailing characters."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring trailing characters."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return float(match.group(1))


def _parse_truncated_int(text: str) -> int:
    return int(_parse_float(text))


_ERRORS = {
    "SUCCESS": LayerError.SUCCESS,
    "TEMP_OUT_OF_RANGE": LayerError.TIMED_OUT,
    "TIMED_OUT": LayerError.TEMP_OUT_RANGE,
}

_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "Layer Number": ("layer_number", _parse_int),
    "Layer Height": ("layer_height", _parse_float),
    "Material Type": ("material_type", str),
    "Extrusion Temperature": ("extrusion_temp", _parse_int),
    "Print Speed": ("print_speed", _parse_int),
    "Layer Adhesion Quality": ("adhesion_quality", str),
    "Infill Density": ("density", _parse_float),
    "Infill Pattern": ("infill_pattern", str),
    "Shell Thickness": ("shell_thickness", _parse_truncated_int),
    "Overhang Angle": ("overhang_angle", _parse_int),
    "Retraction Settings": ("retraction_settings", _parse_int),
    "Cooling Fan Speed": ("cooling_fan_speed", _parse_int),
    "Z-Offset Adjustment": ("z_offset_adjustment", _parse_float),
    "Print Bed Temperature": ("print_bed_temp", _parse_int),
    "Layer Time": ("layer_time", str),
    "file_name": ("filename", str),
    "image url\r": ("url_image", str),
}


def split_csv_line(line: str) -> list[str]:
    """Split a line on commas; a trailing empty cell is dropped."""
    if not line:
        return []
    cells = line.split(",")
    if cells[-1] == "":
        cells.pop()
    return cells


def row_to_layer(headers: Sequence[str], values: Sequence[str]) -> Layer | None:
    """Build a layer from a row, or return None if the row is malformed."""
    if len(headers) != len(values):
        return None
    layer = Layer()
    try:
        for header, value in zip(headers, values):
            if header == "Layer Error":
                if value in _ERRORS:
                    layer.error = _ERRORS[value]
                continue
            field = _FIELDS.get(header)
            if field is not None:
                name, parse = field
                setattr(layer, name, parse(value))
    except (ValueError, OverflowError):
        return None
    return layer


class CSVReader:
    """Collects layers from one or more CSV files."""

    def __init__(self, filename: str | None = None) -> None:
        self._composite_layer = CompositeLayers()
        if filename is not None:
            self.process_csv(filename)

    def process_csv(self, filename: str) -> None:
        """Read ``filename`` and append every well-formed row as a layer."""
        logger.info("%s", filename)
        try:
            handle = open(filename, encoding="utf-8", newline="")
        except OSError as exc:
            raise OSError(f"Could not open file {filename}") from exc
        with handle:
            lines = (line.removesuffix("\n") for line in handle)
            headers = split_csv_line(next(lines, ""))
            for line in lines:
                layer = row_to_layer(headers, split_csv_line(line))
                if layer is not None:
                    self._composite_layer.add_layer(layer)

    @property
    def composite_layer(self) -> CompositeLayers:
        """A copy of the layers read so far."""
        return CompositeLayers(self._composite_layer.layers)