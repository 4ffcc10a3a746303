"""File and directory module loader with server/client distribution.

A module's realm decides where it runs:

- ``server`` modules execute on the server only.
- ``client`` modules are sent to clients by the server and execute on clients.
- ``shared`` modules are sent to clients and execute on every side.

``send_to_client`` only records the file in :attr:`ModuleLoader.client_files`;
shipping that manifest is up to the host.
"""

from __future__ import annotations

import importlib.util
import logging
import re
from pathlib import Path
from types import ModuleType

from tll.core.config.base import Realm
from tll.core.config.settings import RuntimeConfig
from tll.core.console import COLORS, ConsoleLogger
from tll.core.exceptions import ModuleLoadError

logger = logging.getLogger(__name__)

_PREFIX_REALMS = {
    "sv": Realm.SERVER,
    "server": Realm.SERVER,
    "cl": Realm.CLIENT,
    "client": Realm.CLIENT,
}

_DIRECTORY_REALMS = {
    "server": Realm.SERVER,
    "client": Realm.CLIENT,
}


def realm_from_filename(file_name: str) -> Realm:
    """Infer a realm from the part of *file_name* before the first underscore.

    ``sv_``/``server_`` mean server, ``cl_``/``client_`` mean client, and
    anything else is shared.
    """
    prefix = file_name.lower().split("_", 1)[0]
    return _PREFIX_REALMS.get(prefix, Realm.SHARED)


class ModuleLoader:
    """Loads Python files according to their realm.

    Args:
        runtime: Which side(s) this process plays. Defaults to a server.
        console: Console logger for load messages.
        extension: File extension of loadable modules.
    """

    def __init__(
        self,
        runtime: RuntimeConfig | None = None,
        console: ConsoleLogger | None = None,
        extension: str = ".py",
    ) -> None:
        self._runtime = runtime or RuntimeConfig()
        self._console = console or ConsoleLogger()
        self._extension = extension
        self.loaded: list[Path] = []
        self.client_files: list[Path] = []

    @property
    def runtime(self) -> RuntimeConfig:
        """Return the runtime configuration."""
        return self._runtime

    def include(self, path: str | Path) -> ModuleType:
        """Execute the file at *path* as a fresh module.

        Raises:
            ModuleLoadError: If the file cannot be read or raises while executing.
        """
        path = Path(path)
        module_name = "tll_loaded." + re.sub(r"\W", "_", path.with_suffix("").as_posix())

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ModuleLoadError(str(path), ImportError(f"No loader for '{path}'"))

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise ModuleLoadError(str(path), exc) from exc

        logger.debug("Included %s as %s", path, module_name)
        self.loaded.append(path)
        return module

    def send_to_client(self, path: str | Path) -> None:
        """Mark *path* for download by clients."""
        path = Path(path)
        if path not in self.client_files:
            self.client_files.append(path)

    def distribute(self, realm: Realm, path: Path) -> ModuleType | None:
        """Send and/or include *path* as *realm* requires on this side.

        Returns:
            The included module, or ``None`` if it does not run on this side.
        """
        is_server = self._runtime.is_server
        is_client = self._runtime.is_client

        if realm is Realm.SERVER:
            if not is_server:
                return None
            self._log_loading(path)
            return self.include(path)

        if realm is Realm.CLIENT:
            if is_server:
                self.send_to_client(path)
            if is_client:
                return self.include(path)
            return None

        if is_server:
            self.send_to_client(path)
            self._log_loading(path)
        return self.include(path)

    def load(self, side: str | Realm, path: str | Path) -> ModuleType | None:
        """Load a single file for *side*.

        Args:
            side: ``server``, ``client`` or ``shared`` (any case).
            path: File to load.

        Returns:
            The included module, ``None`` if the file is missing or does not
            run on this side.

        Raises:
            ValueError: If *side* names no realm.
            ModuleLoadError: If the module fails while executing.
        """
        realm = Realm.parse(side)
        path = Path(path)

        if not path.is_file():
            self._console.log(self._console.prefix, "Could not find file: ", COLORS["path"], str(path))
            return None

        return self.distribute(realm, path)

    def load_files(self, side: str | Realm | None, directory: str | Path) -> list[ModuleType]:
        """Load every module in *directory* and its immediate subdirectories.

        With a *side*, every file is distributed to that realm. Without one,
        the realm comes from the file-name prefix (see
        :func:`realm_from_filename`); inside a subdirectory named ``server``
        or ``client`` the subdirectory name wins.

        Returns:
            The modules included by this call, in load order.
        """
        realm = Realm.parse(side) if side is not None else None
        directory = Path(directory)
        modules: list[ModuleType] = []

        if not directory.is_dir():
            self._console.log(
                self._console.prefix, "Could not find directory: ", COLORS["path"], str(directory)
            )
            return modules

        for path in self._files_in(directory):
            module = self.distribute(realm or realm_from_filename(path.name), path)
            if module is not None:
                modules.append(module)

        for subdirectory in sorted(p for p in directory.iterdir() if p.is_dir()):
            for path in self._files_in(subdirectory):
                file_realm = realm or _DIRECTORY_REALMS.get(subdirectory.name) or realm_from_filename(path.name)
                module = self.distribute(file_realm, path)
                if module is not None:
                    modules.append(module)

        return modules

    def _files_in(self, directory: Path) -> list[Path]:
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == self._extension)

    def _log_loading(self, path: Path) -> None:
        self._console.log(self._console.prefix, "Loading file: ", COLORS["path"], str(path))
