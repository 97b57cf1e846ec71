"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import resultportal

    assert resultportal.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from resultportal.config import (
        CollegeConfig,
        FetchConfig,
        LoggingConfig,
        MarksConfig,
        PortalConfig,
        load_config,
    )

    assert PortalConfig is not None
    assert CollegeConfig is not None
    assert FetchConfig is not None
    assert MarksConfig is not None
    assert LoggingConfig is not None
    assert load_config is not None


def test_core_module_imports() -> None:
    """Verify parser and locator are exported where callers expect them."""
    from resultportal.ingestion import parse, parse_sheet
    from resultportal.lookup import find_record, lookup_in_text
    from resultportal.schemas import MarksheetSchema, StudentRecord

    assert parse is not None
    assert parse_sheet is not None
    assert find_record is not None
    assert lookup_in_text is not None
    assert StudentRecord is not None
    assert MarksheetSchema is not None
