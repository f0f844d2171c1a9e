"""A simulated printer that replays layers from a CSV file."""

from __future__ import annotations

import argparse
import itertools
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .csv_reader import CSVReader
from .downloader import FileDownloader
from .exporter import FileWriter, JsonPlugin, PluginConverter
from .layer import LayerError
from .modes import AutomaticMode, UserMode

logger = logging.getLogger(__name__)


@dataclass
class Summary:
    """Counts of layers seen during a print job."""

    total_jobs: int = 0
    failed_jobs: int = 0
    printed_jobs: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "expected layer height": self.total_jobs,
            "failed layers": self.failed_jobs,
            "total printed layers ": self.printed_jobs,
        }


class FakePrinter:
    """Reads layers, exports each one and fetches its image."""

    _ids = itertools.count()

    def __init__(
        self,
        name: str,
        plugin: PluginConverter,
        csv_file_name: str,
        directory_name: str,
        mode: UserMode,
        base_path: str | Path | None = None,
        downloader: FileDownloader | None = None,
    ) -> None:
        self.name = name
        self.id = next(FakePrinter._ids)
        self._plugin = plugin
        self._csv_file_name = csv_file_name
        self._directory_name = directory_name
        self._mode = mode
        self._base_path = Path.cwd() if base_path is None else Path(base_path)
        self._downloader = downloader if downloader is not None else FileDownloader()
        self._reader = CSVReader()
        self._jobs = 0
        self._failed_jobs = 0
        (self._base_path / self._directory_name).mkdir(parents=True, exist_ok=True)
        logger.info("%s", self._base_path)

    def print_job(self, filename: str) -> Summary:
        """Print every layer of the CSV file and write ``summary.json``."""
        self._reader.process_csv(str(self._base_path / self._csv_file_name))
        composite = self._reader.composite_layer
        logger.info("%d", len(composite))

        for layer in composite:
            file_name = f"layer_{layer.layer_number}"
            directory_path = self._base_path / self._directory_name / file_name
            directory_path.mkdir(parents=True, exist_ok=True)

            with FileWriter(directory_path, file_name, self._plugin.clone()) as writer:
                self._mode.continue_print()
                if layer.error != LayerError.SUCCESS:
                    self._mode.encountered_error()
                    self._failed_jobs += 1
                else:
                    self._jobs += 1

                if self._mode.stop_printing():
                    break

                self._downloader.start_download(
                    layer.url_image, str(directory_path), layer.filename
                )
                writer.write(layer)

        summary = Summary(
            total_jobs=len(composite),
            failed_jobs=self._failed_jobs,
            printed_jobs=self._jobs,
        )
        self.write_to_json(summary, str(self._base_path / "summary.json"))
        return summary

    def write_to_json(self, summary: Summary, summary_file: str) -> None:
        """Write the summary as indented JSON; failure to open is logged."""
        text = json.dumps(summary.to_dict(), indent=4, sort_keys=True)
        try:
            with open(summary_file, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError:
            logger.error("Could not open file for writing!")


def main(argv: list[str] | None = None) -> int:
    """Run one automatic print job from a CSV file in the current directory."""
    parser = argparse.ArgumentParser(description="Replay print layers from a CSV file.")
    parser.add_argument("csv_file", nargs="?", default="fl_coding_challenge_v1.csv")
    parser.add_argument("--directory", default="Printing")
    parser.add_argument("--job", default="Job1")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    printer = FakePrinter(
        "Formlabs Printer",
        JsonPlugin(),
        args.csv_file,
        args.directory,
        AutomaticMode(),
    )
    printer.print_job(args.job)
    return 0