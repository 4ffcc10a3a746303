"""Tests for the realm-aware module loader."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tll.core.config.base import Realm
from tll.core.config.settings import RuntimeConfig
from tll.core.console import ConsoleLogger
from tll.core.exceptions import ModuleLoadError
from tll.runtime.loader import ModuleLoader, realm_from_filename

# ── Helpers ──────────────────────────────────────────────────────────

SERVER = RuntimeConfig(is_server=True, is_client=False)
CLIENT = RuntimeConfig(is_server=False, is_client=True)
LISTEN_SERVER = RuntimeConfig(is_server=True, is_client=True)


def _write(path: Path, body: str = "VALUE = 1\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body)
    return path


def _make_loader(runtime: RuntimeConfig) -> tuple[ModuleLoader, MagicMock]:
    log = MagicMock()
    return ModuleLoader(runtime, console=ConsoleLogger(logger=log)), log


def _messages(log: MagicMock) -> list[str]:
    return [c.args[2] for c in log.log.call_args_list]


# ── Tests ────────────────────────────────────────────────────────────


class TestRealmFromFilename:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("sv_init.py", Realm.SERVER),
            ("server_hooks.py", Realm.SERVER),
            ("SV_Upper.py", Realm.SERVER),
            ("cl_hud.py", Realm.CLIENT),
            ("client_menu.py", Realm.CLIENT),
            ("sh_shared.py", Realm.SHARED),
            ("server.py", Realm.SHARED),
            ("config.py", Realm.SHARED),
        ],
    )
    def test_prefixes(self, name: str, expected: Realm) -> None:
        assert realm_from_filename(name) is expected


class TestLoad:
    def test_server_file_on_server(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "sv_init.py")
        loader, log = _make_loader(SERVER)

        module = loader.load("server", path)

        assert module is not None
        assert module.VALUE == 1
        assert loader.loaded == [path]
        assert loader.client_files == []
        assert _messages(log) == [f"[TLL] Loading file: {path}"]

    def test_server_file_on_client_is_skipped(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "sv_init.py")
        loader, _ = _make_loader(CLIENT)

        assert loader.load("server", path) is None
        assert loader.loaded == []

    def test_client_file_on_server_is_sent_only(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "cl_hud.py")
        loader, log = _make_loader(SERVER)

        assert loader.load("client", path) is None
        assert loader.client_files == [path]
        assert loader.loaded == []
        assert _messages(log) == []

    def test_client_file_on_client_is_included(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "cl_hud.py")
        loader, _ = _make_loader(CLIENT)

        assert loader.load("client", path) is not None
        assert loader.client_files == []

    def test_client_file_on_listen_server(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "cl_hud.py")
        loader, _ = _make_loader(LISTEN_SERVER)

        assert loader.load("client", path) is not None
        assert loader.client_files == [path]

    def test_shared_file_on_server(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "sh_util.py")
        loader, log = _make_loader(SERVER)

        assert loader.load("shared", path) is not None
        assert loader.client_files == [path]
        assert loader.loaded == [path]
        assert _messages(log) == [f"[TLL] Loading file: {path}"]

    def test_shared_file_on_client(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "sh_util.py")
        loader, log = _make_loader(CLIENT)

        assert loader.load("shared", path) is not None
        assert loader.client_files == []
        assert _messages(log) == []

    def test_side_is_case_insensitive(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "a.py")
        loader, _ = _make_loader(SERVER)
        assert loader.load("SERVER", path) is not None

    def test_unknown_side(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "a.py")
        loader, _ = _make_loader(SERVER)
        with pytest.raises(ValueError):
            loader.load("everywhere", path)

    def test_missing_file_is_logged(self, tmp_path: Path) -> None:
        loader, log = _make_loader(SERVER)
        missing = tmp_path / "nope.py"

        assert loader.load("server", missing) is None
        assert _messages(log) == [f"[TLL] Could not find file: {missing}"]

    def test_failing_module_raises(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "broken.py", "raise RuntimeError('boom')\n")
        loader, _ = _make_loader(SERVER)

        with pytest.raises(ModuleLoadError, match="boom") as exc_info:
            loader.load("server", path)
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert loader.loaded == []

    def test_custom_prefix(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "a.py")
        log = MagicMock()
        loader = ModuleLoader(SERVER, console=ConsoleLogger(logger=log, prefix="Addon"))

        loader.load("server", path)

        assert _messages(log) == [f"[Addon] Loading file: {path}"]


class TestLoadFiles:
    @pytest.fixture()
    def tree(self, tmp_path: Path) -> Path:
        root = tmp_path / "addon"
        _write(root / "cl_hud.py")
        _write(root / "sh_util.py")
        _write(root / "sv_init.py")
        _write(root / "readme.txt", "not python")
        _write(root / "client" / "menu.py")
        _write(root / "misc" / "cl_extra.py")
        _write(root / "misc" / "sv_extra.py")
        _write(root / "server" / "db.py")
        _write(root / "misc" / "deeper" / "ignored.py")
        return root

    def test_realms_inferred_on_server(self, tree: Path) -> None:
        loader, _ = _make_loader(SERVER)

        modules = loader.load_files(None, tree)

        assert len(modules) == 4
        assert loader.loaded == [
            tree / "sh_util.py",
            tree / "sv_init.py",
            tree / "misc" / "sv_extra.py",
            tree / "server" / "db.py",
        ]
        assert loader.client_files == [
            tree / "cl_hud.py",
            tree / "sh_util.py",
            tree / "client" / "menu.py",
            tree / "misc" / "cl_extra.py",
        ]

    def test_realms_inferred_on_client(self, tree: Path) -> None:
        loader, _ = _make_loader(CLIENT)

        loader.load_files(None, tree)

        assert loader.loaded == [
            tree / "cl_hud.py",
            tree / "sh_util.py",
            tree / "client" / "menu.py",
            tree / "misc" / "cl_extra.py",
        ]
        assert loader.client_files == []

    def test_explicit_side_overrides_names(self, tree: Path) -> None:
        loader, _ = _make_loader(SERVER)

        modules = loader.load_files("server", tree)

        assert len(modules) == 7
        assert loader.client_files == []

    def test_explicit_client_side_on_server(self, tree: Path) -> None:
        loader, _ = _make_loader(SERVER)

        assert loader.load_files("client", tree) == []
        assert len(loader.client_files) == 7

    def test_missing_directory(self, tmp_path: Path) -> None:
        loader, log = _make_loader(SERVER)

        assert loader.load_files(None, tmp_path / "missing") == []
        assert "Could not find directory" in _messages(log)[0]


class TestSendToClient:
    def test_deduplicates(self, tmp_path: Path) -> None:
        loader, _ = _make_loader(SERVER)
        loader.send_to_client(tmp_path / "a.py")
        loader.send_to_client(str(tmp_path / "a.py"))
        assert loader.client_files == [tmp_path / "a.py"]
