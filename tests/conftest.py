"""
Shared fixtures: synthetic ENVI header text and .hdr/.dat file pairs.
"""
import pytest

from envi_reader.parsers import parse_header


def build_header_text(samples, lines, bands, data_type=1, interleave="bsq", byte_order=0, extra=()):
    """ENVI header text with all required fields."""
    rows = [
        "ENVI",
        "description = {synthetic test raster}",
        f"samples = {samples}",
        f"lines = {lines}",
        f"bands = {bands}",
        "header offset = 0",
        "file type = ENVI Standard",
        f"data type = {data_type}",
        f"interleave = {interleave}",
        f"byte order = {byte_order}",
    ]
    rows.extend(extra)
    return "\n".join(rows) + "\n"


@pytest.fixture
def header_text():
    return build_header_text


@pytest.fixture
def make_header():
    """Build a Header from geometry keywords."""
    def _make(*args, **kwargs):
        return parse_header(build_header_text(*args, **kwargs))
    return _make


@pytest.fixture
def write_envi(tmp_path):
    """Write a header/data pair into tmp_path and return the .hdr path."""
    def _write(header_text, raw, name="scene", ext=".dat"):
        hdr_path = tmp_path / f"{name}.hdr"
        hdr_path.write_text(header_text, encoding="utf-8")
        if raw is not None:
            (tmp_path / f"{name}{ext}").write_bytes(bytes(raw))
        return hdr_path
    return _write
