import os
import stat

from tilewm.autostart import AUTOSTART, AUTOSTART_BLOCKING, autostart_dir, run_autostart


def _script(path, body, executable=True):
    path.write_text("#!/bin/sh\n" + body + "\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    os.chmod(path, mode)


def test_no_home_gives_none():
    assert autostart_dir({}) is None
    assert run_autostart({}) == []


def test_xdg_dir_used_when_present(tmp_path):
    xdg = tmp_path / "xdg"
    (xdg / "dwm").mkdir(parents=True)
    env = {"HOME": str(tmp_path / "home"), "XDG_DATA_HOME": str(xdg)}
    assert autostart_dir(env) == f"{xdg}/dwm"


def test_xdg_dir_missing_falls_back(tmp_path):
    env = {"HOME": str(tmp_path), "XDG_DATA_HOME": str(tmp_path / "none")}
    assert autostart_dir(env) == f"{tmp_path}/.dwm"


def test_local_share_used_when_xdg_empty(tmp_path):
    (tmp_path / ".local" / "share" / "dwm").mkdir(parents=True)
    env = {"HOME": str(tmp_path), "XDG_DATA_HOME": ""}
    assert autostart_dir(env) == f"{tmp_path}/.local/share/dwm"


def test_run_blocking_script(tmp_path):
    directory = tmp_path / ".dwm"
    directory.mkdir()
    marker = tmp_path / "marker"
    _script(directory / AUTOSTART_BLOCKING, f"echo ran > '{marker}'")
    started = run_autostart({"HOME": str(tmp_path)})
    assert started == [f"{directory}/{AUTOSTART_BLOCKING}"]
    assert marker.read_text() == "ran\n"


def test_non_executable_scripts_skipped(tmp_path):
    directory = tmp_path / ".dwm"
    directory.mkdir()
    marker = tmp_path / "marker"
    _script(directory / AUTOSTART_BLOCKING, f"echo ran > '{marker}'", executable=False)
    _script(directory / AUTOSTART, "exit 0", executable=False)
    assert run_autostart({"HOME": str(tmp_path)}) == []
    assert not marker.exists()


def test_background_script_started(tmp_path):
    directory = tmp_path / ".dwm"
    directory.mkdir()
    _script(directory / AUTOSTART, "exit 0")
    started = run_autostart({"HOME": str(tmp_path)})
    assert started == [f"{directory}/{AUTOSTART}"]