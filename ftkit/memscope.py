"""Scoped ownership tracking for objects.

Objects are registered under an integer scope id. Inside a scope they are
kept in groups: an object registered with a reference to an object already
in the scope joins that object's group, so related objects (a container and
the things it holds) are released together. Whole scopes can be released,
moved into one another, or purged at once.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

MAIN_SCOPE = 1
_SCOPE_LIMIT = 1 << 64

Group = List[Any]


def _find_group(groups: List[Group], obj: Any) -> Optional[int]:
    """Index of the group holding ``obj`` (by identity), or None."""
    for index, group in enumerate(groups):
        if any(member is obj for member in group):
            return index
    return None


def _check_scope(scope: int) -> None:
    if isinstance(scope, bool) or not isinstance(scope, int):
        raise TypeError(f"scope must be an int, not {type(scope).__name__}")
    if not 0 < scope < _SCOPE_LIMIT:
        raise ValueError(f"scope must be a non-zero 64-bit unsigned id, got {scope}")


class ScopeRegistry:
    """Registry of objects grouped under numbered scopes.

    ``on_release`` is called with every object the registry lets go of when
    a scope, a group or everything is freed.
    """

    def __init__(self, on_release: Optional[Callable[[Any], Any]] = None) -> None:
        self._scopes: Dict[int, List[Group]] = {}
        self._on_release = on_release

    def _release(self, groups: List[Group]) -> None:
        if self._on_release is None:
            return
        for group in groups:
            for obj in group:
                self._on_release(obj)

    def allocate(
        self, size: int, scope: int = MAIN_SCOPE, reference: Any = None
    ) -> bytearray:
        """Create a buffer of ``size`` bytes and register it under ``scope``."""
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        _check_scope(scope)
        return self.add(bytearray(size), scope, reference)

    def add(self, obj: Any, scope: int = MAIN_SCOPE, reference: Any = None) -> Any:
        """Register ``obj`` under ``scope`` and return it.

        With a ``reference`` already in the scope, ``obj`` joins its group;
        otherwise it starts a group of its own. The scope is created if needed.
        """
        _check_scope(scope)
        groups = self._scopes.setdefault(scope, [])
        index = None if reference is None else _find_group(groups, reference)
        if index is None:
            groups.append([obj])
        else:
            groups[index].append(obj)
        return obj

    def free(self, scope: int) -> None:
        """Release every object in ``scope`` and forget the scope."""
        groups = self._scopes.pop(scope, None)
        if groups is not None:
            self._release(groups)

    def purge(self) -> None:
        """Release every object in every scope."""
        scopes, self._scopes = self._scopes, {}
        for groups in scopes.values():
            self._release(groups)

    def free_object(self, scope: int, obj: Any) -> None:
        """Release the group holding ``obj`` in ``scope``.

        A scope left empty is forgotten. Unknown objects are ignored.
        """
        if obj is None:
            return
        _check_scope(scope)
        groups = self._scopes.get(scope)
        if groups is None:
            return
        index = _find_group(groups, obj)
        if index is None:
            return
        self._release([groups.pop(index)])
        if not groups:
            del self._scopes[scope]

    def move(self, obj: Any, scope: int, target_scope: int) -> None:
        """Move the group holding ``obj`` from ``scope`` to ``target_scope``.

        The target is created if needed; a source left empty is forgotten.
        Unknown objects are ignored.
        """
        _check_scope(scope)
        _check_scope(target_scope)
        if obj is None:
            return
        groups = self._scopes.get(scope)
        if groups is None:
            return
        index = _find_group(groups, obj)
        if index is None:
            return
        group = groups.pop(index)
        self._scopes.setdefault(target_scope, []).append(group)
        if not groups:
            del self._scopes[scope]

    def merge(self, scope: int, target_scope: int) -> None:
        """Move every group of ``scope`` into ``target_scope`` and forget ``scope``."""
        _check_scope(scope)
        _check_scope(target_scope)
        if scope == target_scope:
            return
        groups = self._scopes.get(scope)
        if groups is None:
            return
        self._scopes.setdefault(target_scope, []).extend(groups)
        del self._scopes[scope]

    def scopes(self) -> List[int]:
        """Scope ids, most recently created first."""
        return list(reversed(self._scopes))

    def objects(self, scope: int) -> List[Any]:
        """Objects registered under ``scope`` in order; empty for an unknown scope."""
        return [obj for group in self._scopes.get(scope, []) for obj in group]