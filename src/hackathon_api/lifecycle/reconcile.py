"""
Judge Reconciliation

Computes the minimal edit between an old and a new set of names, restricted to
names that resolve against a known pool (e.g. hackers with judge capability).

Names that do not resolve are dropped from both sides rather than raised: a
judge renamed or removed upstream must not block saving the project.
"""

from typing import Callable
from typing import Dict
from typing import Iterable
from typing import List
from typing import NamedTuple
from typing import TypeVar

from loguru import logger

E = TypeVar("E")


class NameChanges(NamedTuple):
    """Resolvable names to add and to remove."""

    added: List[str]
    removed: List[str]


class EntityChanges(NamedTuple):
    """Resolved pool entities to add and to remove."""

    added: list
    removed: list


def _ordered_unique(names: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(names))


def reconcile(old: Iterable[str], new: Iterable[str], pool: Iterable[str]) -> NameChanges:
    """
    Diff two name collections against a resolvable pool.

    removed = (old - new) & pool, added = (new - old) & pool, both computed
    from the original collections so applying them in either order gives the
    same result. Order of first appearance is preserved.

    Args:
        old: Names currently assigned
        new: Names requested
        pool: Names that can be resolved

    Returns:
        NameChanges(added, removed)
    """
    old_names = _ordered_unique(old)
    new_names = _ordered_unique(new)
    resolvable = set(pool)
    old_set = set(old_names)
    new_set = set(new_names)

    unresolved = [name for name in old_names + new_names if name not in resolvable]
    if unresolved:
        logger.debug("Dropping unresolved names from reconciliation", unresolved=_ordered_unique(unresolved))

    removed = [name for name in old_names if name not in new_set and name in resolvable]
    added = [name for name in new_names if name not in old_set and name in resolvable]
    return NameChanges(added=added, removed=removed)


def reconcile_entities(
    old: Iterable[str],
    new: Iterable[str],
    pool: Iterable[E],
    name_of: Callable[[E], str],
) -> EntityChanges:
    """
    Same as reconcile(), returning the pool entities instead of their names.

    When several pool entities share a name the first one wins.
    """
    by_name: Dict[str, E] = {}
    for entity in pool:
        by_name.setdefault(name_of(entity), entity)

    changes = reconcile(old, new, by_name.keys())
    return EntityChanges(
        added=[by_name[name] for name in changes.added],
        removed=[by_name[name] for name in changes.removed],
    )
