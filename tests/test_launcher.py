import importlib
import sys

import pytest

from dsproxy.errors import LaunchError
from dsproxy.launcher import ExecLauncher, SpawnLauncher, default_launcher

launcher_module = importlib.import_module("dsproxy.launcher")


def test_spawn_run_returns_child_exit_status() -> None:
    assert SpawnLauncher().run(sys.executable, ["-c", "raise SystemExit(5)"]) == 5


def test_spawn_run_success() -> None:
    assert SpawnLauncher().run(sys.executable, ["-c", "pass"]) == 0


def test_spawn_replace_drops_program_name() -> None:
    status = SpawnLauncher().replace(sys.executable, ["vmtoolsd", "-c", "raise SystemExit(4)"])
    assert status == 4


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
def test_spawn_run_maps_signal_death_to_generic_failure() -> None:
    script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    assert SpawnLauncher().run(sys.executable, ["-c", script]) == 1


def test_spawn_run_reports_missing_binary(tmp_path) -> None:
    with pytest.raises(LaunchError):
        SpawnLauncher().run(str(tmp_path / "missing"), [])


def test_exec_replace_passes_argv_unchanged(monkeypatch) -> None:
    captured: dict[str, object] = {}

    class _Replaced(Exception):
        pass

    def _fake_execv(path, argv):
        captured["path"] = path
        captured["argv"] = argv
        raise _Replaced

    monkeypatch.setattr(launcher_module.os, "execv", _fake_execv)
    with pytest.raises(_Replaced):
        ExecLauncher().replace("/usr/bin/vmtoolsd.bin", ("vmtoolsd", "--cmd", "info-get guestinfo.a.b"))
    assert captured == {
        "path": "/usr/bin/vmtoolsd.bin",
        "argv": ["vmtoolsd", "--cmd", "info-get guestinfo.a.b"],
    }


def test_exec_replace_reports_os_errors(tmp_path) -> None:
    with pytest.raises(LaunchError):
        ExecLauncher().replace(str(tmp_path / "missing"), ["vmtoolsd"])


def test_default_launcher_spawns_on_windows(monkeypatch) -> None:
    monkeypatch.setattr(launcher_module.sys, "platform", "win32")
    assert type(default_launcher()) is SpawnLauncher


def test_default_launcher_execs_elsewhere(monkeypatch) -> None:
    monkeypatch.setattr(launcher_module.sys, "platform", "linux")
    assert type(default_launcher()) is ExecLauncher


def test_exec_replace_reports_empty_argv(tmp_path) -> None:
    binary = tmp_path / "vmtoolsd.bin"
    binary.write_text("")
    with pytest.raises(LaunchError):
        ExecLauncher().replace(str(binary), [])
