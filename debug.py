# debug.py
from __future__ import annotations
import logging
from typing import Dict

LOGGER_NAME = "ENIGMA"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"


class Debug:
    _root_configured: bool = False          # class-level guard
    _log_to: str | None = None

    # shared by every instance so the CLI can switch library modules on
    _enabled: bool = True
    _components: Dict[str, bool] = {
        "alphabet":    False,
        "permutation": False,
        "rotor":       False,
        "stepping":    False,
        "encipher":    False,
        "config":      False,
    }

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file once the
        first component is enabled.
        """
        if log_to:
            Debug._log_to = log_to
        self.logger = logging.getLogger(LOGGER_NAME)

    @classmethod
    def _configure_root(cls) -> None:
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if cls._log_to:
            handlers.append(logging.FileHandler(cls._log_to, encoding="utf-8"))

        logging.basicConfig(
            level=logging.DEBUG,
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str, *args: object) -> None:
        if Debug._enabled and Debug._components.get(component, False):
            self.logger.debug("[%s] " + message, component.upper(), *args)

    def active(self, component: str) -> bool:
        return Debug._enabled and Debug._components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = True
        if components:
            self._configure_root()

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._components[component] = not Debug._components[component]
        if Debug._components[component]:
            self._configure_root()

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    @classmethod
    def component_names(cls) -> list[str]:
        return list(cls._components)

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
