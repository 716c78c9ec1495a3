import pytest

from weaves.hacks import (
    Hack,
    MissingWeavesHomeError,
    NoHackDirError,
    Weave,
    is_hack,
    weaves_home,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("WEAVES_HOME", str(tmp_path))
    return tmp_path


def _make_project(home, name="proj"):
    hack_dir = home / name / "hack"
    hack_dir.mkdir(parents=True)
    (hack_dir / "b_script").write_text("#!/usr/bin/env python3\nprint('b')\n")
    (hack_dir / "a_script").write_text("#!/bin/bash\necho a\n")
    nested = hack_dir / "nested"
    nested.mkdir()
    (nested / "c_script").write_text("")
    return home / name


def test_is_hack():
    assert is_hack("hack") is True
    assert is_hack("hacks") is False
    assert is_hack("Hack") is False


def test_weaves_home_reads_env(home):
    assert weaves_home() == str(home)


def test_weaves_home_missing(monkeypatch):
    monkeypatch.delenv("WEAVES_HOME", raising=False)
    with pytest.raises(MissingWeavesHomeError, match="WEAVES_HOME"):
        weaves_home()


def test_runtime_from_shebang(tmp_path):
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python3\nprint('hi')\n")
    assert Hack(name="script", path=str(script)).runtime() == "/usr/bin/env python3"


def test_runtime_strips_carriage_return(tmp_path):
    script = tmp_path / "script"
    script.write_bytes(b"#!/bin/bash\r\necho hi\r\n")
    assert Hack(name="script", path=str(script)).runtime() == "/bin/bash"


def test_runtime_of_empty_file_is_default(tmp_path):
    script = tmp_path / "empty"
    script.write_text("")
    assert Hack(name="empty", path=str(script)).runtime() == "/bin/sh"


def test_runtime_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Hack(name="x", path=str(tmp_path / "missing")).runtime()


def test_root(home):
    assert Weave(project="proj").root() == f"{home}/proj"


def test_files_sorted(home):
    _make_project(home)
    (home / "proj" / "README").write_text("readme")
    names = [e.name for e in Weave(project="proj").files()]
    assert names == sorted(names)
    assert set(names) == {"README", "hack"}


def test_hack_dir(home):
    _make_project(home)
    entry = Weave(project="proj").hack_dir()
    assert entry.name == "hack"


def test_no_hack_dir(home):
    (home / "empty_proj").mkdir()
    with pytest.raises(NoHackDirError, match="empty_proj doesnt have a hack dir"):
        Weave(project="empty_proj").hack_dir()


def test_hack_file_is_not_a_hack_dir(home):
    (home / "fileproj").mkdir()
    (home / "fileproj" / "hack").write_text("not a dir")
    with pytest.raises(NoHackDirError):
        Weave(project="fileproj").hack_dir()


def test_hacks_walks_in_name_order(home):
    root = _make_project(home)
    hacks = Weave(project="proj").hacks()
    assert [h.name for h in hacks] == ["a_script", "b_script", "c_script"]
    assert hacks[0].path == f"{root}/hack/a_script"
    assert hacks[2].path.endswith("nested/c_script")


def test_hacks_record_runtimes(home):
    _make_project(home)
    runtimes = {h.name: h.runtime() for h in Weave(project="proj").hacks()}
    assert runtimes["a_script"] == "/bin/bash"
    assert runtimes["b_script"] == "/usr/bin/env python3"
    assert runtimes["c_script"] == "/bin/sh"


def test_hacks_are_cached(home):
    root = _make_project(home)
    weave = Weave(project="proj")
    first = weave.hacks()
    (root / "hack" / "z_script").write_text("#!/bin/sh\n")
    assert weave.hacks() is first
    assert len(weave.hacks()) == 3


def test_hacks_without_hack_dir_raises(home):
    (home / "bare").mkdir()
    with pytest.raises(NoHackDirError):
        Weave(project="bare").hacks()