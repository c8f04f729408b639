import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from smartcli import utils
from smartcli.utils import get_program_invocation, running_in_container, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode():
    setup_logging(mode="cli", console_log_level=logging.INFO)
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO


def test_json_mode():
    setup_logging(mode="json")
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.WARNING


def test_mode_from_environment(monkeypatch):
    monkeypatch.setenv("SMARTCLI_LOG_MODE", "json")
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_log_file(tmp_path):
    log_file = tmp_path / "smartcli.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    logging.getLogger("smartcli").debug("parsed")
    for handler in handlers:
        handler.flush()
    assert '"message": "parsed"' in log_file.read_text(encoding="utf-8")
    handlers[1].close()


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["not-on-path-script.py"])
    monkeypatch.setattr("shutil.which", lambda name: None)
    monkeypatch.setattr("sys.executable", "/usr/bin/python3")
    assert get_program_invocation() == "python not-on-path-script.py"


def test_get_program_invocation_on_path(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/reverse"])
    monkeypatch.setattr("shutil.which", lambda name: name)
    assert get_program_invocation() == "reverse"


@pytest.mark.parametrize(
    "content,expected",
    [
        ("0::/system.slice/docker-3f2a.scope\n", True),
        ("12:pids:/kubepods/burstable/pod1\n", True),
        ("0::/init.scope\n", False),
    ],
)
def test_running_in_container(tmp_path, monkeypatch, content, expected):
    cgroup = tmp_path / "cgroup"
    cgroup.write_text(content, encoding="UTF-8")
    monkeypatch.setattr(utils, "CGROUP_PATH", cgroup)
    assert running_in_container() is expected


def test_running_in_container_without_cgroup(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, "CGROUP_PATH", tmp_path / "missing")
    assert not running_in_container()


def test_container_defaults_to_json(tmp_path, monkeypatch):
    cgroup = tmp_path / "cgroup"
    cgroup.write_text("0::/docker/abc\n", encoding="UTF-8")
    monkeypatch.setattr(utils, "CGROUP_PATH", cgroup)
    monkeypatch.delenv("SMARTCLI_LOG_MODE", raising=False)
    setup_logging()
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_invalid_mode_keeps_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    with pytest.raises(ValueError):
        setup_logging(mode="xml")
    assert root.handlers == before
