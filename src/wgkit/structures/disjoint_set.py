"""Array-backed disjoint-set (union-find) data structure."""

import random
from collections.abc import Hashable
from typing import Generic, TypeVar

from wgkit.config import TieBreakPolicy
from wgkit.errors import DuplicateElementError, SameComponentError, UnknownElementError

__all__ = ["DisjointSet"]

T = TypeVar("T", bound=Hashable)

_INITIAL_CAPACITY = 2


class DisjointSet(Generic[T]):
    """Union-find with path compression and union by rank.

    Each registered item owns one slot in a parent table. A slot holding a
    non-negative value points at its parent slot; a slot holding a negative
    value is a root and stores ``-rank``. Fresh singletons start at ``-1``.

    Attributes
    ----------
    policy : TieBreakPolicy
        Root selection when two ranks are equal.

    Examples
    --------
        >>> ds = DisjointSet[int](policy=TieBreakPolicy.FIRST)
        >>> for i in range(3):
        ...     ds.make_set(i)
        >>> ds.union(0, 1)
        >>> ds.connected(1, 0)
        True
        >>> ds.connected(0, 2)
        False
    """

    def __init__(
        self,
        policy: TieBreakPolicy = TieBreakPolicy.RANDOM,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize an empty disjoint set.

        Parameters
        ----------
        policy : TieBreakPolicy, optional
            Tie-break policy for equal ranks, by default RANDOM.
        rng : random.Random | None, optional
            Pseudo-random source used by the RANDOM policy. A private
            ``random.Random()`` is created when omitted.
        """
        self.policy = TieBreakPolicy(policy)
        self._rng = rng if rng is not None else random.Random()
        self._pointers: list[int] = [0] * _INITIAL_CAPACITY
        self._slots: dict[T, int] = {}
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: object) -> bool:
        return item in self._slots

    @property
    def capacity(self) -> int:
        """Current length of the slot table."""
        return len(self._pointers)

    def make_set(self, item: T) -> None:
        """Register ``item`` as a new singleton component.

        Parameters
        ----------
        item : T
            Item to register.

        Raises
        ------
        DuplicateElementError
            If an equal item is already registered.
        """
        if item in self._slots:
            raise DuplicateElementError(item)

        if self._size == len(self._pointers):
            self._grow()

        self._slots[item] = self._size
        self._pointers[self._size] = -1
        self._size += 1

    def find_set(self, item: T) -> int:
        """Return the representative slot of the component holding ``item``.

        Every slot on the way to the root is re-pointed at the root.

        Parameters
        ----------
        item : T
            Registered item.

        Returns
        -------
        int
            Slot index of the component root.

        Raises
        ------
        UnknownElementError
            If ``item`` was never registered.
        """
        try:
            index = self._slots[item]
        except KeyError:
            raise UnknownElementError(item) from None

        root = index
        while self._pointers[root] >= 0:
            root = self._pointers[root]

        while index != root:
            parent = self._pointers[index]
            self._pointers[index] = root
            index = parent

        return root

    def union(self, item_a: T, item_b: T) -> None:
        """Merge the components holding ``item_a`` and ``item_b``.

        The root with the larger rank becomes the parent. On equal ranks the
        tie-break policy picks the new root, whose rank grows by one.

        Parameters
        ----------
        item_a : T
            First item.
        item_b : T
            Second item.

        Raises
        ------
        UnknownElementError
            If either item was never registered.
        SameComponentError
            If both items already share a component.
        """
        root_a = self.find_set(item_a)
        root_b = self.find_set(item_b)
        if root_a == root_b:
            raise SameComponentError(item_a, item_b)

        stored_a = self._pointers[root_a]
        stored_b = self._pointers[root_b]

        if stored_a > stored_b:
            self._pointers[root_a] = root_b
        elif stored_b > stored_a:
            self._pointers[root_b] = root_a
        else:
            winner, loser = self._break_tie(root_a, root_b)
            self._pointers[loser] = winner
            self._pointers[winner] -= 1

    def connected(self, item_a: T, item_b: T) -> bool:
        """Check whether two items share a component."""
        return self.find_set(item_a) == self.find_set(item_b)

    def rank(self, item: T) -> int:
        """Return the rank stored at the root of ``item``'s component."""
        return -self._pointers[self.find_set(item)]

    @property
    def num_components(self) -> int:
        """Number of distinct components."""
        return sum(1 for i in range(self._size) if self._pointers[i] < 0)

    def get_components(self) -> list[list[T]]:
        """Get all components.

        Returns
        -------
        list[list[T]]
            Items grouped by component, in registration order.
        """
        components: dict[int, list[T]] = {}
        for item in self._slots:
            components.setdefault(self.find_set(item), []).append(item)
        return list(components.values())

    def _break_tie(self, root_a: int, root_b: int) -> tuple[int, int]:
        """Return ``(winner, loser)`` for two roots of equal rank."""
        if self.policy is TieBreakPolicy.FIRST:
            return root_a, root_b
        if self.policy is TieBreakPolicy.SECOND:
            return root_b, root_a
        if self._rng.random() < 0.5:
            return root_a, root_b
        return root_b, root_a

    def _grow(self) -> None:
        """Double the slot table, keeping existing indices."""
        self._pointers.extend([0] * len(self._pointers))
