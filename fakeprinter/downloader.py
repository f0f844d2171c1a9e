"""Downloading layer images to local files."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


def _copy_chunks(source: BinaryIO, target: BinaryIO) -> int:
    """Copy ``source`` into ``target`` chunk by chunk and return the byte count."""
    total = 0
    while True:
        chunk = source.read(_CHUNK_SIZE)
        if not chunk:
            if total == 0:
                logger.debug("No data received.")
            return total
        logger.debug("Received data chunk: size = %d", len(chunk))
        target.write(chunk)
        total += len(chunk)


class FileDownloader:
    """Fetches a URL and stores the response body in a file."""

    def start_download(self, url: str, folder_name: str, filename: str) -> bool:
        """Download ``url`` minus its last character to ``folder_name/filename``.

        The last character is dropped because URLs read from the layer CSV
        carry the line's trailing carriage return. Returns True when a
        response was received; network failures are logged, not raised.
        Raises OSError if the output file cannot be opened.
        """
        if not url:
            raise ValueError("Cannot download from an empty URL")
        url = url[:-1]
        file_path = Path(f"{folder_name}/{filename}")
        logger.info("url: %s", url)
        logger.info("Saving to: %s", file_path)
        try:
            output = open(file_path, "wb")
        except OSError as exc:
            raise OSError("Error opening file") from exc

        with output:
            try:
                with urllib.request.urlopen(url) as response:
                    _copy_chunks(response, output)
                    status = response.status
            except urllib.error.HTTPError as err:
                _copy_chunks(err, output)
                status = err.code
            except (urllib.error.URLError, OSError, ValueError) as exc:
                logger.error("Download failed: %s", exc)
                return False

        logger.info("Download succeeded! HTTP Response Code: %s", status)
        return True