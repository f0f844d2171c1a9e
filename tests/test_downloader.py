import io
import urllib.error
from unittest import mock

import pytest

from fakeprinter.downloader import FileDownloader

URL = "https://drive.google.com/uc?export=download&id=18dB2HuwpFoyW0AyFDIilJ_PqbYkgeUkH"


class _Response(io.BytesIO):
    status = 200


def test_download_writes_body_and_drops_last_character(tmp_path):
    response = _Response(b"image bytes")
    with mock.patch("urllib.request.urlopen", return_value=response) as urlopen:
        ok = FileDownloader().start_download(URL, str(tmp_path), "test_image")
    assert ok is True
    assert urlopen.call_args.args[0] == URL[:-1]
    assert (tmp_path / "test_image").read_bytes() == b"image bytes"


def test_download_strips_carriage_return(tmp_path):
    response = _Response(b"abc")
    with mock.patch("urllib.request.urlopen", return_value=response) as urlopen:
        FileDownloader().start_download("http://example.com/a.png\r", str(tmp_path), "a.png")
    assert urlopen.call_args.args[0] == "http://example.com/a.png"
    assert (tmp_path / "a.png").read_bytes() == b"abc"


def test_network_failure_is_reported_not_raised(tmp_path):
    error = urllib.error.URLError("unreachable")
    with mock.patch("urllib.request.urlopen", side_effect=error):
        ok = FileDownloader().start_download(URL, str(tmp_path), "test_image")
    assert ok is False
    assert (tmp_path / "test_image").read_bytes() == b""


def test_http_error_body_is_saved(tmp_path):
    error = urllib.error.HTTPError(URL, 404, "Not Found", {}, io.BytesIO(b"missing"))
    with mock.patch("urllib.request.urlopen", side_effect=error):
        ok = FileDownloader().start_download(URL, str(tmp_path), "page")
    assert ok is True
    assert (tmp_path / "page").read_bytes() == b"missing"


def test_unwritable_target_raises(tmp_path):
    with pytest.raises(OSError, match="Error opening file"):
        FileDownloader().start_download(URL, str(tmp_path / "absent"), "test_image")


def test_empty_url_raises(tmp_path):
    with pytest.raises(ValueError):
        FileDownloader().start_download("", str(tmp_path), "x")