"""Tests for launch configuration and validation."""

from pathlib import Path

import pytest

from pico8_launcher.settings import LaunchConfig


@pytest.fixture
def existing_files(tmp_path: Path) -> LaunchConfig:
    exe = tmp_path / "pico8"
    exe.write_text("", encoding="utf-8")
    entry = tmp_path / "main.lua"
    entry.write_text("print('hi')", encoding="utf-8")
    return LaunchConfig(
        exe_path=str(exe),
        entry_path=str(entry),
        cart_path=str(tmp_path / "game.p8"),
    )


class TestFromEnviron:
    """Test reading configuration from the environment."""

    def test_reads_all_variables(self) -> None:
        """Test every variable is read into its field."""
        config = LaunchConfig.from_environ({
            "PICO8_EXE_PATH": "/opt/pico8",
            "ENTRY_FILE_PATH": "src/main.lua",
            "ENTRY_CART_PATH": "game.p8",
            "PICO8_ARGS": "-windowed 1",
        })
        assert config == LaunchConfig("/opt/pico8", "src/main.lua", "game.p8", "-windowed 1")

    def test_missing_variables_default_to_empty(self) -> None:
        """Test unset variables become empty strings."""
        config = LaunchConfig.from_environ({})
        assert config.exe_path == ""
        assert config.extra_args == ""
        assert config.launch_args == []

    def test_launch_args_split_on_single_spaces(self) -> None:
        """Test extra arguments are split on each single space."""
        assert LaunchConfig(extra_args="-windowed 1 -volume 64").launch_args == [
            "-windowed", "1", "-volume", "64",
        ]
        assert LaunchConfig(extra_args="a  b").launch_args == ["a", "", "b"]

    def test_config_is_immutable(self) -> None:
        """Test the config cannot be changed after creation."""
        config = LaunchConfig()
        with pytest.raises(AttributeError):
            config.exe_path = "x"  # type: ignore[misc]


class TestValidation:
    """Test LaunchConfigValidator through LaunchConfig.validate."""

    def test_valid_config(self, existing_files: LaunchConfig) -> None:
        """Test existing files validate without errors or warnings."""
        result = existing_files.validate()
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.parametrize("field, variable", [
        ("exe_path", "PICO8_EXE_PATH"),
        ("entry_path", "ENTRY_FILE_PATH"),
        ("cart_path", "ENTRY_CART_PATH"),
    ])
    def test_blank_values_are_errors(
        self, existing_files: LaunchConfig, field: str, variable: str
    ) -> None:
        """Test blank required values are reported as not specified."""
        config = LaunchConfig(**{**existing_files.__dict__, field: "   "})
        result = config.validate()

        assert not result.is_valid
        assert result.errors == [
            f"{variable} has not been specified. "
            "Did you specify a path in the .vscode/launch.json file?"
        ]

    def test_missing_executable(self, existing_files: LaunchConfig, tmp_path: Path) -> None:
        """Test a missing executable is an error."""
        config = LaunchConfig(**{**existing_files.__dict__, "exe_path": str(tmp_path / "nope")})
        result = config.validate()

        assert not result.is_valid
        assert result.errors[0].startswith("PICO8_EXE_PATH points to a missing file.")

    def test_missing_entry_file(self, existing_files: LaunchConfig, tmp_path: Path) -> None:
        """Test a missing entry file is an error."""
        config = LaunchConfig(**{**existing_files.__dict__, "entry_path": str(tmp_path / "nope.lua")})
        result = config.validate()

        assert not result.is_valid
        assert result.errors[0].startswith("ENTRY_FILE_PATH points to a missing file.")

    def test_errors_reported_in_order(self) -> None:
        """Test errors follow executable, entry, cartridge order."""
        result = LaunchConfig().validate()
        assert [error.split(" ")[0] for error in result.errors] == [
            "PICO8_EXE_PATH", "ENTRY_FILE_PATH", "ENTRY_CART_PATH",
        ]

    def test_cartridge_need_not_exist(self, existing_files: LaunchConfig) -> None:
        """Test a missing cartridge file is allowed."""
        assert not existing_files.cart_exists
        assert existing_files.validate().is_valid

    def test_cartridge_warnings(self, existing_files: LaunchConfig, tmp_path: Path) -> None:
        """Test odd cartridge paths only produce warnings."""
        cart = tmp_path / "missing_dir" / "game.txt"
        config = LaunchConfig(**{**existing_files.__dict__, "cart_path": str(cart)})
        result = config.validate()

        assert result.is_valid
        assert len(result.warnings) == 2
