"""Accessors over the process environment.

``get_env``, ``has_env`` and ``del_env`` take one or more names. With exactly
one name they return a single result, otherwise a list in the same order as
the names. ``get_many``/``has_many``/``del_many`` are the list-only forms.

Every function takes an optional ``store``; by default the process-wide store
bound with ``use_store`` is used (``os.environ`` unless rebound).
"""

from __future__ import annotations

import logging
from pathlib import Path
from collections.abc import Iterable

from envkit.parser import load_env_file
from envkit.store import EnvStore, OsEnvironStore

logger = logging.getLogger(__name__)

_default_store: EnvStore = OsEnvironStore()


def use_store(store: EnvStore) -> EnvStore:
    """Bind the process-wide default store and return the previous one."""
    global _default_store
    previous = _default_store
    _default_store = store
    return previous


def _resolve(store: EnvStore | None) -> EnvStore:
    return store if store is not None else _default_store


def init_env(
    env_path: str | Path = ".env",
    *,
    store: EnvStore | None = None,
    override: bool = True,
    strict: bool = False,
) -> None:
    """Load ``env_path`` into the store. A missing file loads nothing."""
    target = _resolve(store)
    parsed = load_env_file(env_path, strict=strict)

    applied = 0
    for name, value in parsed.items():
        if not override and target.has(name):
            continue
        set_env(name, value, store=target)
        applied += 1
    logger.debug("Applied %d of %d variables from %s", applied, len(parsed), env_path)


def set_env(name: str, value: str, *, store: EnvStore | None = None) -> None:
    _resolve(store).set(name, value)


def get_many(names: Iterable[str], *, store: EnvStore | None = None) -> list[str | None]:
    target = _resolve(store)
    return [target.get(name) for name in names]


def get_env(*names: str, store: EnvStore | None = None) -> str | None | list[str | None]:
    """Return the value of one variable, or a list of values for several.

    Missing variables come back as ``None``.
    """
    if len(names) == 1:
        return _resolve(store).get(names[0])
    return get_many(names, store=store)


def has_many(names: Iterable[str], *, store: EnvStore | None = None) -> list[bool]:
    target = _resolve(store)
    return [target.has(name) for name in names]


def has_env(*names: str, store: EnvStore | None = None) -> bool | list[bool]:
    if len(names) == 1:
        return _resolve(store).has(names[0])
    return has_many(names, store=store)


def has_env_all(*names: str, store: EnvStore | None = None) -> bool:
    """True when every name is set. True for no names at all."""
    return all(has_many(names, store=store))


def del_many(names: Iterable[str], *, store: EnvStore | None = None) -> None:
    target = _resolve(store)
    for name in names:
        target.delete(name)


def del_env(*names: str, store: EnvStore | None = None) -> None:
    """Remove variables. Names that are not set are ignored."""
    del_many(names, store=store)
