import os
import pytest
from typing import List

from svcsetup_core.config import SetupSettings
from svcsetup_core.core.context import ExecutionContext
from svcsetup_core.core.runner import CommandRunner
from svcsetup_core.init_systems import profile_for
from svcsetup_core.models.service_info import RunConfig, ResolvedPaths
from svcsetup_core.output.console import Reporter


class RecordingRunner(CommandRunner):
    """Remembers every command and answers with preset exit statuses."""

    def __init__(self, failures=None):
        self.commands: List[str] = []
        self.failures = failures or {}

    def run(self, command: str) -> int:
        self.commands.append(command)
        return self.failures.get(command, 0)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    # Keep host or working directory settings files out of the tests
    monkeypatch.setenv("PMTR_SETUP_CONFIG", str(tmp_path / "no-such-settings.yaml"))
    monkeypatch.setattr("svcsetup_core.config.DEFAULT_CONFIG_PATHS", [])


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def fake_root(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    return root


@pytest.fixture
def make_file(fake_root):
    """Create a file under fake_root at the given host path."""
    def _make(path, executable=False, content=""):
        full = os.path.join(str(fake_root), path.lstrip("/"))
        os.makedirs(os.path.dirname(full), exist_ok=True)
        with open(full, "w") as f:
            f.write(content)
        if executable:
            os.chmod(full, 0o755)
        return full
    return _make


@pytest.fixture
def make_context(runner, fake_root):
    def _make(config: RunConfig, init_system="systemd", bindir="/usr/bin",
              settings=None) -> ExecutionContext:
        settings = settings or SetupSettings()
        resolved = ResolvedPaths(
            bindir=bindir,
            init_system=init_system,
            profile=profile_for(init_system, settings.daemon),
        )
        return ExecutionContext(
            config=config,
            settings=settings,
            resolved=resolved,
            runner=runner,
            reporter=Reporter(config),
            root=str(fake_root),
        )
    return _make


def snapshot(root) -> List[str]:
    """Every path below root, for before/after comparisons."""
    paths = []
    for dirpath, dirnames, filenames in os.walk(str(root)):
        for name in dirnames + filenames:
            paths.append(os.path.join(dirpath, name))
    return sorted(paths)


@pytest.fixture
def tree_snapshot():
    return snapshot
