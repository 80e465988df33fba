from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from tagkeeper.__main__ import _print_startup_error, main


@pytest.mark.unit
class TestMain:
    """Tests for the ``python -m tagkeeper`` entry point."""

    @pytest.mark.parametrize(
        "exit_code",
        [0, 1, 130],
        ids=["success", "error", "interrupted"],
    )
    def test_returns_cli_exit_code(self, exit_code: int) -> None:
        mock_cli_module = MagicMock()
        mock_cli_module.main = MagicMock(return_value=exit_code)

        with patch.dict("sys.modules", {"tagkeeper.cli": mock_cli_module}):
            result = main()

        assert result == exit_code
        mock_cli_module.main.assert_called_once_with()

    def test_import_error_returns_one(self, capsys: pytest.CaptureFixture) -> None:
        # A None entry in sys.modules makes the import raise ImportError
        with patch.dict("sys.modules", {"tagkeeper.cli": None}):
            result = main()

        assert result == 1
        assert "ImportError:" in capsys.readouterr().err


@pytest.mark.unit
class TestPrintStartupError:
    """Tests for _print_startup_error."""

    def test_includes_version(self, capsys: pytest.CaptureFixture) -> None:
        mock_version_module = MagicMock(__version__="1.2.3")

        with patch.dict(sys.modules, {"tagkeeper.__version__": mock_version_module}):
            _print_startup_error(ImportError("Test error message"))

        captured = capsys.readouterr()
        assert "tagkeeper version: 1.2.3" in captured.err
        assert "ImportError: Test error message" in captured.err
        assert captured.out == ""

    def test_version_import_fails(self, capsys: pytest.CaptureFixture) -> None:
        with patch.dict(sys.modules, {"tagkeeper.__version__": None}):
            _print_startup_error(ImportError("Test error message"))

        assert "tagkeeper version: <unknown>" in capsys.readouterr().err
