"""Converting layers to text and writing them to files."""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType
from typing import IO

from .layer import Layer


def layer_to_dict(layer: Layer) -> dict[str, object]:
    """Return the layer as a plain dictionary with the error as an integer."""
    return {
        "error": int(layer.error),
        "layer_number": layer.layer_number,
        "layer_height": layer.layer_height,
        "material_type": layer.material_type,
        "extrusion_temp": layer.extrusion_temp,
        "print_speed": layer.print_speed,
        "adhesion_quality": layer.adhesion_quality,
        "density": layer.density,
        "infill_pattern": layer.infill_pattern,
        "shell_thickness": layer.shell_thickness,
        "overhang_angle": layer.overhang_angle,
        "cooling_fan_speed": layer.cooling_fan_speed,
        "retraction_settings": layer.retraction_settings,
        "z_offset_adjustment": layer.z_offset_adjustment,
        "print_bed_temp": layer.print_bed_temp,
        "layer_time": layer.layer_time,
        "filename": layer.filename,
        "url_image": layer.url_image,
    }


class PluginConverter(ABC):
    """Turns a layer into text in some format."""

    @abstractmethod
    def convert(self, layer: Layer) -> str:
        """Return the text form of ``layer``."""

    def clone(self) -> PluginConverter:
        """Return an independent copy of this converter."""
        return copy.copy(self)


class JsonPlugin(PluginConverter):
    """Pretty-printed JSON with sorted keys."""

    def convert(self, layer: Layer) -> str:
        return json.dumps(
            layer_to_dict(layer), indent=4, sort_keys=True, ensure_ascii=False
        )

    def clone(self) -> JsonPlugin:
        return JsonPlugin()


def _yaml_scalar(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


_YAML_FIELDS = (
    "layer_number",
    "layer_height",
    "material_type",
    "extrusion_temp",
    "print_speed",
    "adhesion_quality",
    "density",
    "infill_pattern",
    "shell_thickness",
    "overhang_angle",
    "cooling_fan_speed",
    "retraction_settings",
    "z_offset_adjustment",
    "print_bed_temp",
    "layer_time",
    "filename",
    "url_image",
)


class YamlPlugin(PluginConverter):
    """A single YAML list item describing the layer."""

    def convert(self, layer: Layer) -> str:
        lines = []
        for index, name in enumerate(_YAML_FIELDS):
            prefix = "- " if index == 0 else "  "
            lines.append(f"{prefix}{name}: {_yaml_scalar(getattr(layer, name))}\n")
        return "".join(lines)

    def clone(self) -> YamlPlugin:
        return YamlPlugin()


class Exporter:
    """Exports layers through a converter plugin."""

    def __init__(self, plugin: PluginConverter) -> None:
        self._plugin = plugin

    def export(self, layer: Layer) -> str:
        return self._plugin.convert(layer)


class FileWriter:
    """Writes text or converted layers to ``directory/filename + extension``."""

    def __init__(
        self,
        directory: str | Path,
        filename: str,
        plugin: PluginConverter,
        file_extension: str = ".json",
        mode: str = "w",
    ) -> None:
        self.directory = str(directory)
        self.filename = filename
        self.file_extension = file_extension
        self.mode = mode
        self._exporter = Exporter(plugin)
        self._stream: IO[str] | None = None
        self.open_file()

    @property
    def path(self) -> Path:
        return Path(self.directory) / f"{self.filename}{self.file_extension}"

    def open_file(self) -> None:
        """Open the target file, raising OSError if that fails."""
        try:
            self._stream = open(self.path, self.mode, encoding="utf-8")
        except OSError as exc:
            raise OSError(f"Failed to open file {self.path}") from exc

    def write(self, data: str | Layer) -> None:
        """Write a string as is, or a layer through the plugin."""
        if self._stream is None or self._stream.closed:
            raise ValueError(f"File {self.path} is not open")
        text = self._exporter.export(data) if isinstance(data, Layer) else data
        self._stream.write(text)

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()