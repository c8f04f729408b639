from pathlib import Path

import pytest

from smartcli.config import FlagConfig, find_smartcli_config, loader
from smartcli.exceptions import ConfigError
from smartcli.parser import UNLIMITED_NUM_OF_ARGS, ErrorType, FileSetFlag

YAML_CONFIG = """\
program: archive
unconsumed: {min: 0, max: 2}
required_set: [compress, decompress]
flags:
  - names: [input, i]
    required: true
    min_args: 1
    max_args: unlimited
    pattern: ".*\\\\.txt"
  - names: [compress, c]
  - names: [decompress, d]
  - names: docs
    files: true
    max_args: 1
"""

TOML_CONFIG = """\
program = "archive"
required_set = ["compress"]

[unconsumed]
min = 1
max = 1

[[flags]]
names = ["output", "o"]
required = true
min_args = 1
max_args = 1

[[flags]]
names = ["compress", "c"]
"""


def write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_yaml(tmp_path):
    parser = loader(write(tmp_path / "smartcli.yaml", YAML_CONFIG))
    assert parser.program == "archive"
    assert [flag.name for flag in parser.flags] == ["input", "compress", "decompress", "docs"]
    assert parser.get_flag("i").max_args == UNLIMITED_NUM_OF_ARGS
    assert isinstance(parser.get_flag("docs"), FileSetFlag)
    assert (parser.unconsumed.min_args, parser.unconsumed.max_args) == (0, 2)

    assert parser.parse_args(["-i", "a.txt", "b.txt", "-c", "extra"])
    parser.clear()
    assert not parser.parse_args(["-i", "a.csv", "-d"])
    assert [error.type for error in parser.get_errors()] == [ErrorType.PATTERN_VIOLATION]


def test_load_toml(tmp_path):
    parser = loader(write(tmp_path / "smartcli.toml", TOML_CONFIG))
    assert parser.required_flag_set is not None
    assert parser.parse_args(["-o", "out", "-c", "leftover"])
    assert parser.unconsumed.values == ["leftover"]


def test_load_truncated_toml_array(tmp_path):
    # toml reads an unclosed array as an empty one.
    parser = loader(write(tmp_path / "smartcli.toml", "flags = [\n"))
    assert parser.flags == []


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


@pytest.mark.parametrize(
    "filename,content",
    [
        ("smartcli.json", "{}"),
        ("smartcli.yaml", "- just\n- a list\n"),
        ("smartcli.yaml", "flags: [\n"),
        ("smartcli.toml", "[flags\n"),
        ("smartcli.yaml", "flags:\n  - names: []\n"),
        ("smartcli.yaml", "flags:\n  - names: [output]\n    min_args: lots\n"),
        ("smartcli.yaml", "flags:\n  - names: [--output]\n"),
        ("smartcli.yaml", "flags:\n  - names: [a]\n  - names: [a]\n"),
        ("smartcli.yaml", "flags:\n  - names: [a]\nrequired_set: [b]\n"),
        ("smartcli.yaml", "flags:\n  - names: [a]\n    pattern: '('\n"),
    ],
)
def test_invalid_config(tmp_path, filename, content):
    with pytest.raises(ConfigError):
        loader(write(tmp_path / filename, content))


def test_flag_config_model():
    config = FlagConfig.model_validate(
        {"flags": [{"names": "verbose"}], "unconsumed": {"max": "*"}}
    )
    parser = config.to_parser()
    assert parser.has_flag("verbose")
    assert parser.unconsumed.max_args == UNLIMITED_NUM_OF_ARGS
    assert parser.required_flag_set is None


def test_find_config_in_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SMARTCLI_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    assert find_smartcli_config() is None

    config = write(tmp_path / ".smartcli.toml", TOML_CONFIG)
    assert find_smartcli_config() == config


def test_find_config_from_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    config = write(tmp_path / "declarations.yaml", YAML_CONFIG)
    monkeypatch.setenv("SMARTCLI_CONFIG", str(config))
    assert find_smartcli_config() == config


def test_find_config_in_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SMARTCLI_CONFIG", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
    config_dir = tmp_path / "home" / ".config" / "smartcli"
    config_dir.mkdir(parents=True)
    config = write(config_dir / "smartcli.toml", TOML_CONFIG)
    assert find_smartcli_config() == config
