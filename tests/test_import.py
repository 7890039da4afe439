"""Verify package imports work correctly."""


def test_import_mdscan() -> None:
    """Test that mdscan can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import mdscan

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert mdscan.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from mdscan import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exports() -> None:
    """Every name in __all__ resolves on the package."""
    import mdscan

    for name in mdscan.__all__:
        assert hasattr(mdscan, name), name


def test_internal_collector_not_exported() -> None:
    """The shared escape collector stays private to the scanners package."""
    import mdscan
    import mdscan.scanners

    assert "_scan_escaped" not in mdscan.scanners.__all__
    assert not hasattr(mdscan.scanners, "scan_escaped")
    assert not hasattr(mdscan, "scan_escaped")
