"""
Release of externally owned handles (device buffers, kernel modules).

Handles expose release(), the same method pooled GPU buffers use. Releases
are expected to succeed; a failing release propagates to the caller and
the remaining handles are left alone.
"""
import logging
from typing import Iterable, List, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Disposable(Protocol):
    def release(self) -> None:
        ...


def release_all(*groups: Iterable[Disposable]):
    """
    Release every handle of every group, in order.

    Accepts the groups either as separate arguments or as one sequence of
    groups: release_all(a, b) and release_all([a, b]) are equivalent.

    Args:
        *groups: Lists of handles
    """
    if len(groups) == 1:
        only = list(groups[0])
        if only and not any(isinstance(item, Disposable) for item in only):
            groups = only
        else:
            groups = (only,)
    for items in groups:
        for item in items:
            item.release()
            logger.debug(f"Released {item!r}")


class ResourceScope:
    """
    Collects handle groups and releases them when the scope exits.

    Example:
        >>> with ResourceScope() as scope:
        ...     weights = scope.track(upload(W))
        ...     hidden = scope.track(alloc(h), alloc(h))
        ...     run(weights, hidden)
        # everything tracked is released here
    """

    def __init__(self):
        self._groups: List[List[Disposable]] = []

    def track(self, *items: Disposable):
        """
        Register handles as one group.

        Returns:
            The single handle if one was given, else the tuple of handles
        """
        self._groups.append(list(items))
        return items[0] if len(items) == 1 else items

    def release(self):
        """Release all tracked groups in registration order"""
        groups, self._groups = self._groups, []
        release_all(*groups)

    def __enter__(self) -> 'ResourceScope':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __len__(self) -> int:
        return sum(len(group) for group in self._groups)

    def __repr__(self):
        return f"ResourceScope(groups={len(self._groups)}, handles={len(self)})"
