from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Iterable
from types import ModuleType

from schema_builder.annotations.graphql import has_markers
from schema_builder.errors import DiscoveryError


def import_package_modules(base_package: str) -> list[ModuleType]:
    # Import the base package and every module below it, depth first, in pkgutil order.
    try:
        root_pkg = importlib.import_module(base_package)
    except Exception as exc:  # noqa: BLE001 - wrap with explicit error
        raise DiscoveryError(f"Failed to import base package: {base_package}") from exc

    if not hasattr(root_pkg, "__path__"):
        raise DiscoveryError(f"Base package has no __path__: {base_package}")

    modules: list[ModuleType] = [root_pkg]
    for module_info in pkgutil.walk_packages(root_pkg.__path__, prefix=f"{base_package}."):
        try:
            modules.append(importlib.import_module(module_info.name))
        except Exception as exc:  # noqa: BLE001 - import failures are fatal for the build
            raise DiscoveryError(f"Failed to import module: {module_info.name}") from exc
    return modules


def discover_marked_classes(modules: Iterable[ModuleType]) -> list[type]:
    # Marked classes defined in the given modules; re-exports are attributed to the defining module only.
    found: list[type] = []
    for module in modules:
        for value in module.__dict__.values():
            if not inspect.isclass(value) or value.__module__ != module.__name__:
                continue
            if has_markers(value):
                found.append(value)
    return found


def collect_classes(additional_classes: Iterable[type], base_package: str = "") -> list[type]:
    # Explicit classes first (in the order given), then the package scan; each class appears once.
    ordered: list[type] = []
    seen: set[type] = set()

    def _add(cls: type) -> None:
        if cls not in seen:
            seen.add(cls)
            ordered.append(cls)

    for cls in additional_classes:
        if not isinstance(cls, type):
            raise DiscoveryError(f"Additional class is not a class: {cls!r}")
        _add(cls)
    if base_package:
        for cls in discover_marked_classes(import_package_modules(base_package)):
            _add(cls)
    return ordered


def package_directory(base_package: str) -> str | None:
    # Filesystem directory of a package, used as the default schema location.
    try:
        module = importlib.import_module(base_package)
    except Exception as exc:  # noqa: BLE001 - wrap with explicit error
        raise DiscoveryError(f"Failed to import base package: {base_package}") from exc
    paths = list(getattr(module, "__path__", []))
    return paths[0] if paths else None
