import errno
import json

import pytest

from grouplauncher import cli, config_loader


class RecordingSpawner:
    """Stands in for subprocess.Popen; records every spawn attempt."""

    def __init__(self, fail_commands=()):
        self.fail_commands = set(fail_commands)
        self.calls = []

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        program = argv if isinstance(argv, str) else argv[0]
        if program in self.fail_commands:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", program)
        return object()

    @property
    def argvs(self):
        return [argv for argv, _ in self.calls]


@pytest.fixture
def spawner():
    return RecordingSpawner()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Empty working dir, empty XDG dirs and no system-wide config."""
    work = tmp_path / "work"
    xdg = tmp_path / "xdg"
    work.mkdir()
    xdg.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("GROUP_LAUNCHER_CONFIG", raising=False)
    monkeypatch.setattr(config_loader, "SYSTEM_CONFIG_PATH", tmp_path / "etc" / "launcher" / "config.json")
    return {"work": work, "xdg": xdg, "etc": tmp_path / "etc"}


@pytest.fixture
def write_json():
    def _write(path, data):
        path.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_data():
    return {
        "groups": [
            {"name": "Study", "apps": [
                {"name": "Notes", "command": "obsidian"},
                {"name": "Browser", "command": "brave-browser", "args": ["--new-window"]},
            ]},
            {"name": "Docker", "apps": [
                {"name": "Containers", "command": "docker start $(docker ps -aq)", "use_shell": True},
                {"name": "Terminal", "command": "konsole"},
            ]},
            {"name": "Nothing", "apps": []},
        ]
    }


@pytest.fixture
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda verbose=False: None)
