"""
Unit tests for SolverConfigLoader.

Test Coverage:
    - YAML loading and defaults
    - Environment variable overrides
    - Error handling for missing or malformed files
"""

import pytest

from linopt.utils import SolverConfig, SolverConfigLoader, parse_bool


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LINOPT_PRESOLVE", "LINOPT_MIP_GAP", "LINOPT_TIME_LIMIT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text(
        "solver:\n"
        "  presolve: false\n"
        "  mip_gap: 0.01\n"
        "  time_limit: 60\n",
        encoding="utf-8",
    )
    return path


class TestLoading:
    """Tests for reading the YAML file."""

    def test_load_file(self, config_file):
        """Test loading every value from a YAML file."""
        config = SolverConfigLoader(str(config_file)).get_solver_config()
        assert config == SolverConfig(presolve=False, mip_gap=0.01, time_limit=60.0)

    def test_partial_file_uses_defaults(self, tmp_path):
        """Test missing keys fall back to defaults."""
        path = tmp_path / "partial.yaml"
        path.write_text("solver:\n  mip_gap: 0.2\n", encoding="utf-8")
        config = SolverConfigLoader(str(path)).get_solver_config()
        assert config.presolve is True
        assert config.mip_gap == 0.2
        assert config.time_limit is None

    def test_default_project_config(self):
        """Test the project config matches the defaults."""
        config = SolverConfigLoader().get_solver_config()
        assert config == SolverConfig()

    def test_missing_explicit_file(self, tmp_path):
        """Test an explicit path that does not exist fails."""
        with pytest.raises(FileNotFoundError):
            SolverConfigLoader(str(tmp_path / "missing.yaml"))

    def test_missing_solver_key(self, tmp_path):
        """Test a file without a solver section fails."""
        path = tmp_path / "bad.yaml"
        path.write_text("other:\n  mip_gap: 0.2\n", encoding="utf-8")
        with pytest.raises(ValueError):
            SolverConfigLoader(str(path))

    def test_empty_file(self, tmp_path):
        """Test an empty file fails."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError):
            SolverConfigLoader(str(path))


class TestEnvironmentOverrides:
    """Tests for LINOPT_* environment variables."""

    def test_overrides(self, config_file, monkeypatch):
        """Test environment variables override the file."""
        monkeypatch.setenv("LINOPT_PRESOLVE", "on")
        monkeypatch.setenv("LINOPT_MIP_GAP", "0.5")
        monkeypatch.setenv("LINOPT_TIME_LIMIT", "2.5")
        config = SolverConfigLoader(str(config_file)).get_solver_config()
        assert config == SolverConfig(presolve=True, mip_gap=0.5, time_limit=2.5)

    def test_invalid_boolean(self, config_file, monkeypatch):
        """Test an unparseable presolve variable fails."""
        monkeypatch.setenv("LINOPT_PRESOLVE", "maybe")
        with pytest.raises(ValueError):
            SolverConfigLoader(str(config_file)).get_solver_config()


class TestParseBool:
    """Tests for parse_bool()."""

    @pytest.mark.parametrize("text", ["1", "true", "Yes", "ON", True])
    def test_true(self, text):
        """Test values parsed as true."""
        assert parse_bool(text) is True

    @pytest.mark.parametrize("text", ["0", "false", "No", "off", False])
    def test_false(self, text):
        """Test values parsed as false."""
        assert parse_bool(text) is False
