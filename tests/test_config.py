"""Tests for configuration file management."""

import pytest
import sys
from wurstwrap.config import (
    CONFIG_FILE_NAME,
    Settings,
    find_config_file,
    load_config,
    validate_config,
    init_config,
)
from wurstwrap.errors import ConfigError, WrapperError


class TestFindConfigFile:
    """Tests for find_config_file()."""

    def test_finds_config_file_in_cwd(self, tmp_path):
        """Test that find_config_file finds wrapper_config.toml in the given directory."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("initial_heap_size = 256\n")

        result = find_config_file(tmp_path)
        assert result == config_file

    def test_returns_none_if_no_config_file(self, tmp_path):
        """Test that returns None if wrapper_config.toml doesn't exist."""
        result = find_config_file(tmp_path)
        assert result is None

    def test_ignores_directory_named_like_config(self, tmp_path):
        """Test that a directory called wrapper_config.toml is not a config file."""
        (tmp_path / CONFIG_FILE_NAME).mkdir()

        result = find_config_file(tmp_path)
        assert result is None

    def test_does_not_search_parent_directories(self, tmp_path):
        """Test that only the given directory is checked."""
        (tmp_path / CONFIG_FILE_NAME).write_text("initial_heap_size = 256\n")
        subdir = tmp_path / "subdir"
        subdir.mkdir()

        result = find_config_file(subdir)
        assert result is None


class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_valid_config(self, tmp_path):
        """Test that load_config loads every supported key."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(
            "initial_heap_size = 256\n"
            "maximum_heap_size = 1024\n"
            "thread_stack_size = 4\n"
            "java_path = \"/opt/java/bin/java\"\n"
            "wurst_path = \"/home/me/.wurst\"\n"
            "java_args = [\"-ea\", \"-XX:+UseG1GC\"]\n"
            "profile = \"console\"\n"
            "verbose = true\n"
        )

        settings = load_config(tmp_path)
        assert settings.initial_heap_size == 256
        assert settings.maximum_heap_size == 1024
        assert settings.thread_stack_size == 4
        assert settings.java_path == "/opt/java/bin/java"
        assert settings.wurst_path == "/home/me/.wurst"
        assert settings.java_args == ("-ea", "-XX:+UseG1GC")
        assert settings.profile == "console"
        assert settings.verbose is True

    def test_returns_empty_settings_if_no_config(self, tmp_path):
        """Test that load_config returns all-unset Settings if the file doesn't exist."""
        settings = load_config(tmp_path)
        assert settings == Settings()
        assert settings.initial_heap_size is None
        assert settings.java_path is None
        assert settings.java_args == ()

    def test_only_specified_fields_populated(self, tmp_path):
        """Test that keys absent from the file stay unset."""
        (tmp_path / CONFIG_FILE_NAME).write_text("maximum_heap_size = 2048\n")

        settings = load_config(tmp_path)
        assert settings == Settings(maximum_heap_size=2048)

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        """Test that load_config reads from the working directory by default."""
        (tmp_path / CONFIG_FILE_NAME).write_text("thread_stack_size = 8\n")
        monkeypatch.chdir(tmp_path)

        settings = load_config()
        assert settings.thread_stack_size == 8

    def test_raises_on_invalid_toml(self, tmp_path):
        """Test that load_config raises ConfigError on invalid TOML."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("initial_heap_size = invalid syntax\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert "unable to parse" in str(exc_info.value)
        assert CONFIG_FILE_NAME in str(exc_info.value)

    def test_raises_on_non_utf8_file(self, tmp_path):
        """Test that a config file that is not valid UTF-8 raises ConfigError."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_bytes(b"java_path = '\xff\xfe'\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert "unable to parse" in str(exc_info.value)
        assert "not valid UTF-8" in str(exc_info.value)

    def test_config_error_is_wrapper_error(self, tmp_path):
        """Test that ConfigError can be caught as WrapperError."""
        (tmp_path / CONFIG_FILE_NAME).write_text("[unterminated\n")

        with pytest.raises(WrapperError):
            load_config(tmp_path)

    def test_raises_on_file_read_error(self, tmp_path):
        """Test that raises ConfigError on file read errors."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("initial_heap_size = 256\n")

        # Make file unreadable (on Unix, unless running as root)
        if sys.platform != "win32":
            config_file.chmod(0o000)
            try:
                try:
                    open(config_file, "rb").close()
                    pytest.skip("File permissions are not enforced for this user")
                except PermissionError:
                    pass
                with pytest.raises(ConfigError) as exc_info:
                    load_config(tmp_path)
                assert "Failed to read" in str(exc_info.value)
            finally:
                config_file.chmod(0o644)

    def test_ignores_unknown_keys(self, tmp_path):
        """Test that unknown keys are ignored."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(
            "initial_heap_size = 256\n"
            "unknown_key = \"value\"\n"
            "another_unknown = 123\n"
        )

        settings = load_config(tmp_path)
        assert settings == Settings(initial_heap_size=256)


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_validates_size_type(self, tmp_path):
        """Test that validate_config checks sizes are integers."""
        config_file = tmp_path / CONFIG_FILE_NAME

        for key in ["initial_heap_size", "maximum_heap_size", "thread_stack_size"]:
            with pytest.raises(ConfigError) as exc_info:
                validate_config({key: "256"}, config_file)
            assert key in str(exc_info.value)
            assert "expected integer" in str(exc_info.value)

    def test_rejects_float_size(self, tmp_path):
        """Test that fractional sizes are rejected."""
        config_file = tmp_path / CONFIG_FILE_NAME

        with pytest.raises(ConfigError) as exc_info:
            validate_config({"maximum_heap_size": 1.5}, config_file)
        assert "expected integer" in str(exc_info.value)

    def test_rejects_boolean_size(self, tmp_path):
        """Test that booleans are not accepted as integer sizes."""
        config_file = tmp_path / CONFIG_FILE_NAME

        with pytest.raises(ConfigError) as exc_info:
            validate_config({"initial_heap_size": True}, config_file)
        assert "expected integer" in str(exc_info.value)

    def test_validates_size_non_negative(self, tmp_path):
        """Test that validate_config rejects negative sizes."""
        config_file = tmp_path / CONFIG_FILE_NAME

        for value in [-1, -512]:
            with pytest.raises(ConfigError) as exc_info:
                validate_config({"thread_stack_size": value}, config_file)
            assert "must be non-negative" in str(exc_info.value)

    def test_accepts_zero_size(self, tmp_path):
        """Test that a size of 0 is accepted."""
        config_file = tmp_path / CONFIG_FILE_NAME

        settings = validate_config({"initial_heap_size": 0}, config_file)
        assert settings.initial_heap_size == 0

    def test_validates_path_types(self, tmp_path):
        """Test that java_path and wurst_path must be strings."""
        config_file = tmp_path / CONFIG_FILE_NAME

        for key in ["java_path", "wurst_path"]:
            with pytest.raises(ConfigError) as exc_info:
                validate_config({key: 42}, config_file)
            assert key in str(exc_info.value)
            assert "expected string" in str(exc_info.value)

    def test_validates_java_args_is_list(self, tmp_path):
        """Test that java_args must be a list."""
        config_file = tmp_path / CONFIG_FILE_NAME

        with pytest.raises(ConfigError) as exc_info:
            validate_config({"java_args": "-ea"}, config_file)
        assert "java_args" in str(exc_info.value)

    def test_validates_java_args_items(self, tmp_path):
        """Test that every java_args entry must be a string."""
        config_file = tmp_path / CONFIG_FILE_NAME

        with pytest.raises(ConfigError) as exc_info:
            validate_config({"java_args": ["-ea", 3]}, config_file)
        assert "list of strings" in str(exc_info.value)

    def test_validates_profile_choices(self, tmp_path):
        """Test that profile must name a known launch profile."""
        config_file = tmp_path / CONFIG_FILE_NAME

        with pytest.raises(ConfigError) as exc_info:
            validate_config({"profile": "fullscreen"}, config_file)
        assert "profile" in str(exc_info.value)
        assert "must be one of" in str(exc_info.value)

    def test_validates_verbose_type(self, tmp_path):
        """Test that verbose must be a boolean."""
        config_file = tmp_path / CONFIG_FILE_NAME

        with pytest.raises(ConfigError) as exc_info:
            validate_config({"verbose": "true"}, config_file)
        assert "expected boolean" in str(exc_info.value)

    def test_preserves_java_args_order(self, tmp_path):
        """Test that java_args keep the order they were written in."""
        config_file = tmp_path / CONFIG_FILE_NAME

        settings = validate_config({"java_args": ["-b", "-a", "-c"]}, config_file)
        assert settings.java_args == ("-b", "-a", "-c")

    def test_settings_are_immutable(self, tmp_path):
        """Test that Settings cannot be modified after validation."""
        config_file = tmp_path / CONFIG_FILE_NAME
        settings = validate_config({"initial_heap_size": 256}, config_file)

        with pytest.raises(AttributeError):
            settings.initial_heap_size = 512


class TestInitConfig:
    """Tests for init_config()."""

    def test_creates_config_file(self, tmp_path):
        """Test that init_config creates wrapper_config.toml."""
        result = init_config(tmp_path)

        assert result == 0
        config_file = tmp_path / CONFIG_FILE_NAME
        assert config_file.exists()
        content = config_file.read_text()
        assert "# initial_heap_size = 256" in content
        assert "# profile = \"windowed\"" in content

    def test_generated_config_loads_as_empty_settings(self, tmp_path):
        """Test that the generated template parses and sets nothing."""
        init_config(tmp_path)

        assert load_config(tmp_path) == Settings()

    def test_refuses_to_overwrite_existing(self, tmp_path, capsys):
        """Test that init_config refuses to overwrite an existing config file."""
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("initial_heap_size = 256\n")

        result = init_config(tmp_path)

        assert result == 1
        assert config_file.read_text() == "initial_heap_size = 256\n"
        captured = capsys.readouterr()
        assert "already exists" in captured.err
