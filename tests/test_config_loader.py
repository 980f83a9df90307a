import json
import os
from pathlib import Path

import pytest

from grouplauncher.config_loader import (
    candidate_paths,
    dump_config,
    example_config,
    load_config,
    parse_config,
    resolve_config_path,
)
from grouplauncher.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from grouplauncher.models import Application, Configuration, Group


def test_minimal_dev_group_loads():
    text = '{"groups":[{"name":"Dev","apps":[{"name":"Editor","command":"true","args":[]}]}]}'
    config = parse_config(text)

    assert [g.name for g in config.groups] == ["Dev"]
    (editor,) = config.groups[0].apps
    assert editor == Application(name="Editor", command="true", args=(), use_shell=False)


@pytest.mark.parametrize("shape", [[], [0], [3], [2, 0, 5], [1, 1, 1, 1]])
def test_groups_and_apps_keep_file_order(shape):
    data = {
        "groups": [
            {"name": f"g{gi}", "apps": [{"name": f"g{gi}a{ai}", "command": f"cmd{ai}"} for ai in range(n)]}
            for gi, n in enumerate(shape)
        ]
    }
    config = parse_config(json.dumps(data))

    assert [g.name for g in config.groups] == [f"g{i}" for i in range(len(shape))]
    for gi, (group, n) in enumerate(zip(config.groups, shape)):
        assert [a.name for a in group.apps] == [f"g{gi}a{ai}" for ai in range(n)]


def test_optional_fields_default(sample_data):
    config = parse_config(json.dumps(sample_data))
    notes = config.groups[0].apps[0]
    assert notes.args == ()
    assert notes.use_shell is False
    assert config.groups[1].apps[0].use_shell is True
    assert config.groups[0].apps[1].args == ("--new-window",)


def test_unknown_keys_are_ignored():
    text = json.dumps({
        "version": 2,
        "groups": [{"name": "Dev", "icon": "x", "apps": [{"name": "Ed", "command": "code", "color": "red"}]}],
    })
    config = parse_config(text)
    assert config.groups[0].apps[0] == Application("Ed", "code")


def test_round_trip_through_json(sample_data):
    config = parse_config(json.dumps(sample_data))
    again = parse_config(dump_config(config))
    assert again == config
    assert again.to_dict() == config.to_dict()


def test_example_config_round_trips():
    example = example_config()
    assert [g.name for g in example.groups] == ["Nothing", "Study", "Docker", "Dev", "Play"]
    assert example.groups[0].apps == ()
    assert parse_config(dump_config(example)) == example


@pytest.mark.parametrize("text", [
    '{"groups": [{"name": "Dev", "apps": [',
    "",
    "not json",
    '{"groups": []',
])
def test_malformed_json_is_a_parse_error(text):
    with pytest.raises(ConfigParseError) as exc:
        parse_config(text)
    assert "invalid JSON" in str(exc.value)


@pytest.mark.parametrize("data, where", [
    ([], "<root>"),
    ({}, "groups"),
    ({"groups": {}}, "groups"),
    ({"groups": [{"apps": []}]}, "groups[0]"),
    ({"groups": [{"name": 3, "apps": []}]}, "groups[0].name"),
    ({"groups": [{"name": "Dev", "apps": {}}]}, "groups[0].apps"),
    ({"groups": [{"name": "Dev", "apps": [{"name": "Ed"}]}]}, "command"),
    ({"groups": [{"name": "Dev", "apps": [{"command": "code"}]}]}, "name"),
    ({"groups": [{"name": "Dev", "apps": [{"name": "Ed", "command": ""}]}]}, "groups[0].apps[0].command"),
    ({"groups": [{"name": "Dev", "apps": [{"name": "Ed", "command": "code", "args": "x"}]}]}, "groups[0].apps[0].args"),
    ({"groups": [{"name": "Dev", "apps": [{"name": "Ed", "command": "code", "args": [1]}]}]}, "groups[0].apps[0].args[0]"),
    ({"groups": [{"name": "Dev", "apps": [{"name": "Ed", "command": "code", "use_shell": "yes"}]}]}, "use_shell"),
    ({"groups": [{"name": "Dev", "apps": [{"name": "Ed", "command": "code", "use_shell": 1}]}]}, "use_shell"),
])
def test_schema_violations_name_the_location(data, where):
    with pytest.raises(ConfigParseError) as exc:
        parse_config(json.dumps(data))
    assert where in exc.value.detail


def test_parse_error_is_a_config_error():
    assert issubclass(ConfigParseError, ConfigError)
    assert issubclass(ConfigNotFoundError, ConfigError)


# ----------------------------
# File resolution
# ----------------------------
def test_candidate_paths_order(isolated_env):
    paths = candidate_paths()
    assert paths[0] == Path.cwd() / "launcher.json"
    assert paths[1] == isolated_env["xdg"] / "launcher" / "config.json"
    assert paths[2] == isolated_env["etc"] / "launcher" / "config.json"


def test_local_file_wins_over_user_file(isolated_env, write_json, sample_data):
    write_json(isolated_env["work"] / "launcher.json", sample_data)
    write_json(isolated_env["xdg"] / "launcher" / "config.json", {"groups": []})

    config = load_config()
    assert config.source == Path.cwd() / "launcher.json"
    assert len(config.groups) == 3


def test_user_file_used_when_no_local_file(isolated_env, write_json):
    user_file = write_json(isolated_env["xdg"] / "launcher" / "config.json", {"groups": [{"name": "Play", "apps": []}]})
    config = load_config()
    assert config.source == user_file
    assert config.groups == (Group("Play"),)


def test_unreadable_local_file_is_skipped(isolated_env, write_json, monkeypatch):
    local = write_json(isolated_env["work"] / "launcher.json", {"groups": []})
    user_file = write_json(isolated_env["xdg"] / "launcher" / "config.json", {"groups": [{"name": "User", "apps": []}]})
    real_access = os.access
    monkeypatch.setattr(os, "access", lambda p, mode: False if Path(p).name == local.name else real_access(p, mode))

    config = load_config()
    assert config.source == user_file
    assert config.groups[0].name == "User"


def test_only_unreadable_files_is_not_found(isolated_env, write_json, monkeypatch):
    write_json(isolated_env["work"] / "launcher.json", {"groups": []})
    monkeypatch.setattr(os, "access", lambda p, mode: False)
    with pytest.raises(ConfigNotFoundError):
        load_config()


def test_system_file_is_last_resort(isolated_env, write_json):
    system_file = write_json(isolated_env["etc"] / "launcher" / "config.json", {"groups": []})
    assert resolve_config_path() == system_file


def test_missing_everywhere_is_not_found(isolated_env):
    with pytest.raises(ConfigNotFoundError) as exc:
        load_config()
    assert len(exc.value.searched) == 3
    # the loader never creates a file
    assert list(isolated_env["work"].iterdir()) == []


def test_explicit_path_skips_the_search(isolated_env, write_json, sample_data, tmp_path):
    write_json(isolated_env["work"] / "launcher.json", sample_data)
    missing = tmp_path / "nope.json"
    with pytest.raises(ConfigNotFoundError) as exc:
        load_config(missing)
    assert exc.value.searched == [missing]


def test_env_var_selects_the_file(isolated_env, write_json, monkeypatch, tmp_path):
    chosen = write_json(tmp_path / "custom.json", {"groups": [{"name": "Env", "apps": []}]})
    monkeypatch.setenv("GROUP_LAUNCHER_CONFIG", str(chosen))
    assert load_config().groups[0].name == "Env"


def test_parse_error_carries_the_file_path(isolated_env, write_json):
    path = write_json(isolated_env["work"] / "launcher.json", '{"groups": [')
    with pytest.raises(ConfigParseError) as exc:
        load_config()
    assert exc.value.path == path


def test_schema_error_from_file_carries_the_file_path(isolated_env, write_json):
    path = write_json(isolated_env["work"] / "launcher.json", {"groups": [{"name": "Dev", "apps": [{"name": "x"}]}]})
    with pytest.raises(ConfigParseError) as exc:
        load_config()
    assert exc.value.path == path
    assert str(path) in str(exc.value)


def test_invalid_utf8_is_a_parse_error(isolated_env):
    (isolated_env["work"] / "launcher.json").write_bytes(b'{"groups": ["\xff\xfe"]}')
    with pytest.raises(ConfigParseError):
        load_config()


def test_configuration_equality_ignores_source():
    assert Configuration(groups=(), source=Path("a.json")) == Configuration(groups=())
