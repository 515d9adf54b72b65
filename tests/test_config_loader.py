import json

import pytest

from config.config_loader import DEFAULT_CONFIG, load_config, validate_config


def write_config(tmp_path, overrides):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(overrides), encoding="utf-8")
    return path


def test_overrides_are_merged_over_defaults(tmp_path):
    output = tmp_path / "out"
    path = write_config(tmp_path, {"delay": 0.1, "output_directory": str(output)})
    config = load_config(str(path))

    assert config["delay"] == 0.1
    assert config["max_steps"] == DEFAULT_CONFIG["max_steps"]
    assert output.is_dir()


def test_output_directory_not_created_without_logging(tmp_path):
    output = tmp_path / "out"
    path = write_config(tmp_path, {"log_runs": False, "output_directory": str(output)})
    load_config(str(path))
    assert not output.exists()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))


def test_wrong_type_is_rejected(tmp_path):
    path = write_config(tmp_path, {"max_steps": "many", "log_runs": False})
    with pytest.raises(TypeError, match="max_steps"):
        load_config(str(path))


def test_bool_is_not_accepted_as_number():
    config = dict(DEFAULT_CONFIG, delay=True)
    with pytest.raises(TypeError, match="delay"):
        validate_config(config)


def test_negative_values_are_rejected():
    with pytest.raises(ValueError, match="delay"):
        validate_config(dict(DEFAULT_CONFIG, delay=-1))
    with pytest.raises(ValueError, match="max_steps"):
        validate_config(dict(DEFAULT_CONFIG, max_steps=-5))


def test_missing_key_is_rejected():
    config = dict(DEFAULT_CONFIG)
    del config["auto"]
    with pytest.raises(ValueError, match="auto"):
        validate_config(config)


def test_verbose_prints_summary(tmp_path, capsys):
    path = write_config(tmp_path, {"log_runs": False})
    load_config(str(path), verbose=True)
    assert "Loaded config" in capsys.readouterr().out
