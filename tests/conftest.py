"""Pytest fixtures for script-picker tests."""

from pathlib import Path

import pytest

UTILITIES_README = """\
# My Scripts
Any text here is ignored by the picker.

## Contents
[Utilities](#utilities)

## Utilities
### [Backup](backup.sh)
<!--source dir
destination dir-->
Copies a directory somewhere safe.

### [Cleanup](cleanup.sh)
<!--(none)-->
Removes temporary files.
"""


@pytest.fixture
def utilities_readme():
    return UTILITIES_README


@pytest.fixture
def script_dir(tmp_path):
    """Create a script directory with a read-me and matching scripts.

    Returns a factory: call with the read-me text and the script file names
    to create (defaults to the Utilities example with both scripts).
    """
    def _create(readme: str = UTILITIES_README, files=("backup.sh", "cleanup.sh"), name: str = "scripts") -> Path:
        directory = tmp_path / name
        directory.mkdir()
        for file_name in files:
            path = directory / file_name
            path.write_text("#!/bin/bash\necho hi\n")
            path.chmod(0o755)
        readme_path = directory / "README.md"
        readme_path.write_text(readme)
        return readme_path

    return _create


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """Point the config directory at a temp location."""
    from script_picker import config

    config_dir = tmp_path / "script-picker-config"
    config_dir.mkdir()
    monkeypatch.setattr(config, "get_config_dir", lambda: config_dir)
    return config_dir


@pytest.fixture
def write_config(config_env):
    """Write a config.yaml into the temp config directory."""
    import yaml

    def _write(data) -> Path:
        path = config_env / "config.yaml"
        if isinstance(data, str):
            path.write_text(data)
        else:
            path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))
        return path

    return _write


@pytest.fixture
def keys():
    """Factory for a key reader that replays the given keystrokes."""
    def _reader(*sequence: str):
        pending = list(sequence)

        def read() -> str:
            if not pending:
                raise AssertionError("menu asked for more keys than scripted")
            return pending.pop(0)

        return read

    return _reader
