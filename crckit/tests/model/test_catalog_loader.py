from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

from crckit.model.algorithm import AlgorithmId, CRCParameters
from crckit.model.catalog import default_metadata_dir
from crckit.model.loader import CatalogLoader


def _write(p: Path, text: str) -> None:
    (p / "algorithms.yml").write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")


def _entry(algo: AlgorithmId) -> str:
    if not algo.is_crc:
        return f"  {algo.value}:\n    name: {algo.value.upper()}\n"
    return (
        f"  {algo.value}:\n"
        f"    name: {algo.value.upper()}\n"
        f"    width: 16\n"
        f"    poly: 0x1021\n"
        f"    init: 0xFFFF\n"
        f"    xor_out: 0x0000\n"
        f"    ref_in: false\n"
        f"    ref_out: false\n"
    )


def _full_catalog(skip: AlgorithmId | None = None, extra: str = "") -> str:
    body = "".join(_entry(a) for a in AlgorithmId if a is not skip)
    return "algorithms:\n" + body + extra


def test_load_packaged_catalog_is_exhaustive():
    loader = CatalogLoader(default_metadata_dir())
    loader.load_all()

    assert set(loader.algorithms) == set(AlgorithmId)
    assert set(loader.file_hashes) == {"algorithms.yml"}
    assert len(loader.file_hashes["algorithms.yml"]) == 64

    modbus = loader.algorithms[AlgorithmId.CRC16_MODBUS]
    assert modbus.name == "CRC-16/MODBUS"
    assert modbus.description == "x16 + x15 + x2 + 1"
    assert modbus.params == CRCParameters(
        width=16, poly=0x8005, init=0xFFFF, xor_out=0x0000, ref_in=True, ref_out=True
    )


def test_load_all_happy_path_from_custom_dir(tmp_path: Path) -> None:
    _write(tmp_path, _full_catalog())

    loader = CatalogLoader(tmp_path)
    loader.load_all()

    info = loader.algorithms[AlgorithmId.CRC8]
    assert info.params is not None and info.params.poly == 0x1021
    assert loader.algorithms[AlgorithmId.SUM].params is None


def test_load_all_requires_catalog_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        CatalogLoader(tmp_path).load_all()


def test_load_all_requires_algorithms_root(tmp_path: Path) -> None:
    _write(tmp_path, "nope: 1\n")
    with pytest.raises(ValueError):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_missing_algorithm(tmp_path: Path) -> None:
    _write(tmp_path, _full_catalog(skip=AlgorithmId.CRC32))
    with pytest.raises(ValueError, match="crc32"):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_unknown_algorithm(tmp_path: Path) -> None:
    _write(tmp_path, _full_catalog(extra="  crc64:\n    name: CRC-64\n"))
    with pytest.raises(ValueError, match="crc64"):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_duplicate_ids_differing_in_case(tmp_path: Path) -> None:
    _write(tmp_path, _full_catalog(extra="  SUM:\n    name: again\n"))
    with pytest.raises(ValueError, match="Duplicate"):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_crc_missing_fields(tmp_path: Path) -> None:
    text = _full_catalog().replace("    ref_out: false\n", "", 1)
    _write(tmp_path, text)
    with pytest.raises(ValueError):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_crc_fields_on_checksum(tmp_path: Path) -> None:
    text = _full_catalog().replace("  sum:\n    name: SUM\n", "  sum:\n    name: SUM\n    width: 8\n", 1)
    _write(tmp_path, text)
    with pytest.raises(ValueError):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_poly_wider_than_width(tmp_path: Path) -> None:
    text = _full_catalog().replace("poly: 0x1021", "poly: 0x11021", 1)
    _write(tmp_path, text)
    with pytest.raises(ValueError):
        CatalogLoader(tmp_path).load_all()


def test_load_all_rejects_non_bool_reflection(tmp_path: Path) -> None:
    text = _full_catalog().replace("ref_in: false", "ref_in: 0", 1)
    _write(tmp_path, text)
    with pytest.raises(ValueError):
        CatalogLoader(tmp_path).load_all()
