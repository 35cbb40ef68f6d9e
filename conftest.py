import sys
from pathlib import Path

# Ensure src is on sys.path so the tests run from a plain checkout
_SRC = Path(__file__).parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


def pytest_report_header(config):
    """Show which reference libraries are available for cross-checks."""
    try:
        import pyproj
        return f"geoutm: pyproj {pyproj.__version__} available for cross-checks"
    except ImportError:
        return "geoutm: pyproj not installed, PROJ cross-checks will be skipped"
