# pyright: reportMissingTypeStubs=false
# pyright: reportUnknownMemberType=false
# pyright: reportUnusedCallResult=false
# ruff: ignore

"""
Reconcile running processes with installed bundles.

Process names reported by the OS don't always match the bundle an app is
installed as, so merging happens in two passes: first build a
raw name -> canonical name map, then merge using that map. Both passes work
on snapshots, which keeps them testable without a shell.
"""

import logging
import concurrent.futures
from typing import Callable, Dict, List, Optional, Sequence

from .search_models import ApplicationEntity

logger = logging.getLogger("AppMerger")


def build_alias_map(
    running_apps: Sequence[ApplicationEntity],
    resolve: Callable[[str], str],
    executor: Optional[concurrent.futures.Executor] = None,
) -> Dict[str, str]:
    """
    Resolve every running app name and map raw -> canonical where they differ.

    Resolutions run concurrently when an executor is given. Each one that
    fails keeps its raw name without affecting the others.
    """
    names = list(dict.fromkeys(app.name for app in running_apps))

    def safe_resolve(name: str) -> str:
        try:
            return resolve(name)
        except Exception as e:
            logger.debug(f"Could not resolve '{name}': {e}")
            return name

    if executor is not None and len(names) > 1:
        resolved = list(executor.map(safe_resolve, names))
    else:
        resolved = [safe_resolve(name) for name in names]

    return {raw: canonical for raw, canonical in zip(names, resolved) if canonical != raw}


def sort_by_default_order(
    apps: Sequence[ApplicationEntity], recent_apps: Sequence[str] = ()
) -> List[ApplicationEntity]:
    """
    Order apps with no active query.

    Recently used apps first (most recent first), then running apps, then
    the rest alphabetically (case-insensitive).
    """
    recent_index = {}
    for index, name in enumerate(recent_apps):
        recent_index.setdefault(name, index)

    def sort_key(app: ApplicationEntity):
        index = recent_index.get(app.name)
        if index is not None:
            return (0, index, 0, "", "")
        return (1, 0, 0 if app.is_running else 1, app.name.casefold(), app.name)

    return sorted(apps, key=sort_key)


def merge_applications(
    running_apps: Sequence[ApplicationEntity],
    installed_apps: Sequence[ApplicationEntity],
    aliases: Optional[Dict[str, str]] = None,
    recent_apps: Sequence[str] = (),
) -> List[ApplicationEntity]:
    """
    Merge running and installed apps into one list with unique names.

    Installed apps keep their bundle name and path and are marked running
    when a running app matches them directly or through `aliases`. Running
    apps with no bundle on disk are appended under their resolved name.
    """
    aliases = aliases or {}
    running_names = {app.name for app in running_apps}
    # Bundle names some running process resolved to
    resolved_names = set(aliases.values())

    merged: List[ApplicationEntity] = []
    emitted = set()

    for installed in installed_apps:
        if installed.name in emitted:
            continue

        is_running = installed.name in running_names or installed.name in resolved_names
        if is_running:
            merged.append(
                ApplicationEntity(
                    name=installed.name,
                    is_running=True,
                    bundle_path=installed.bundle_path,
                )
            )
        else:
            merged.append(installed)
        emitted.add(installed.name)

    # Running apps with no bundle found on disk
    for running in running_apps:
        bundle_name = aliases.get(running.name, running.name)
        if bundle_name in emitted or running.name in emitted:
            continue
        merged.append(ApplicationEntity(name=bundle_name, is_running=True))
        emitted.add(bundle_name)

    logger.debug(
        f"Merged {len(running_apps)} running and {len(installed_apps)} installed "
        f"apps into {len(merged)}"
    )
    return sort_by_default_order(merged, recent_apps)


def load_all_apps(
    running_apps: Sequence[ApplicationEntity],
    installed_apps: Sequence[ApplicationEntity],
    resolve: Callable[[str], str],
    recent_apps: Sequence[str] = (),
    executor: Optional[concurrent.futures.Executor] = None,
) -> List[ApplicationEntity]:
    """Resolve running app names, then merge."""
    aliases = build_alias_map(running_apps, resolve, executor)
    return merge_applications(running_apps, installed_apps, aliases, recent_apps)
