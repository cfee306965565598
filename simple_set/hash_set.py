import logging

from collections.abc import Callable, Hashable, Iterable, Iterator, KeysView
from typing import Any, Generic, TypeVar

# Internal imports
from simple_set.utils.error_strings import UNHASHABLE_ELEMENT_STRING

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)


class UnhashableElementError(TypeError):
    def __init__(self, elem: Any):
        super().__init__(UNHASHABLE_ELEMENT_STRING.format(type_name=type(elem).__name__))


def _check_hashable(elem: Any) -> None:
    """
    Raise UnhashableElementError if elem can't be hashed.

    Only the hash is checked here, so a TypeError from an element's own __eq__ still propagates as is.
    """
    try:
        hash(elem)
    except TypeError as e:
        raise UnhashableElementError(elem) from e


class HashSet(Generic[T]):
    """
    An unordered collection of unique elements backed by a dictionary.

    Only the keys matter, every value is None. Iteration order is whatever the dictionary gives back
    and must not be relied on.

    Not thread-safe: guard a shared instance with your own lock.
    """

    def __init__(self, *elems: T):
        self.data: dict[T, None] = dict()
        self.update(elems)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "HashSet[T]":
        """
        Build a set from any iterable. Duplicates are collapsed.
        """
        result: HashSet[T] = cls()
        result.update(iterable)
        return result

    ############################################### Membership ####################################################

    def add(self, elem: T) -> None:
        """
        Add an element to the set. No-op if it's already present.
        """
        _check_hashable(elem)
        self.data[elem] = None

    def remove(self, elem: T) -> None:
        """
        Remove an element from the set if it exists. Never fails on a missing element.
        """
        _check_hashable(elem)
        self.data.pop(elem, None)

    def contains(self, elem: T) -> bool:
        _check_hashable(elem)
        return elem in self.data

    def contains_all(self, *elems: T) -> bool:
        """
        Return True if every given element is in the set (True for no elements).
        """
        for elem in elems:
            if not self.contains(elem):
                return False
        return True

    def contains_any(self, *elems: T) -> bool:
        """
        Return True if at least one given element is in the set (False for no elements).
        """
        for elem in elems:
            if self.contains(elem):
                return True
        return False

    def elements(self) -> KeysView[T]:
        """
        Read-only view of the current members. Stays live across mutations, including clear().
        """
        return self.data.keys()

    def clear(self) -> None:
        logger.debug(f"Clearing set with {len(self.data)} elements")
        # Clear in place so views handed out by elements() see the empty set
        self.data.clear()

    ############################################### Bulk updates ####################################################

    def update(self, items: Iterable[T]) -> None:
        """
        Same as regular set update, adds all items from the iterable to the set.
        """
        initial_size: int = len(self.data)
        for item in items:
            self.add(item)
        logger.debug(f"Update added {len(self.data) - initial_size} elements, size is now {len(self.data)}")

    def difference_update(self, items: Iterable[T]) -> None:
        """
        Same as regular set difference_update, removes all items in the iterable from the set.
        """
        initial_size: int = len(self.data)
        for item in items:
            self.remove(item)
        logger.debug(f"Difference update removed {initial_size - len(self.data)} elements")

    def intersection_update(self, other: "HashSet[T]") -> None:
        """
        Keep only the elements that are also in other.
        """
        initial_size: int = len(self.data)
        # Copy the keys, can't delete from a dict while iterating over it
        for elem in list(self.data):
            if elem not in other.data:
                del self.data[elem]
        logger.debug(f"Intersection update removed {initial_size - len(self.data)} elements")

    ############################################### Derived sets ####################################################

    def clone(self) -> "HashSet[T]":
        """
        Return an independent copy. Mutating either set never affects the other.
        """
        logger.debug(f"Cloning set with {len(self.data)} elements")
        result: HashSet[T] = self.__class__()
        result.data = dict.fromkeys(self.data)
        return result

    def union(self, other: "HashSet[T]") -> "HashSet[T]":
        """
        Return a new set with the elements present in either set.

        Complexity: O(n + m)
        """
        logger.debug(f"Union of sets with sizes {len(self.data)} and {len(other.data)}")
        result: HashSet[T] = self.clone()
        result.data.update(other.data)
        return result

    def intersection(self, other: "HashSet[T]") -> "HashSet[T]":
        """
        Return a new set with the elements present in both sets.

        Always walks the smaller set and looks each element up in the larger one, so the cost is O(min(n, m)).
        """
        logger.debug(f"Intersection of sets with sizes {len(self.data)} and {len(other.data)}")
        if len(self.data) <= len(other.data):
            smaller, larger = self, other
        else:
            smaller, larger = other, self

        result: HashSet[T] = self.__class__()
        for elem in smaller.data:
            if elem in larger.data:
                result.data[elem] = None
        return result

    def difference(self, other: "HashSet[T]") -> "HashSet[T]":
        """
        Return a new set with the elements of this set that are not in other.

        Only this set is scanned: O(n) where n is the size of this set.
        """
        logger.debug(f"Difference of sets with sizes {len(self.data)} and {len(other.data)}")
        result: HashSet[T] = self.__class__()
        for elem in self.data:
            if elem not in other.data:
                result.data[elem] = None
        return result

    def symmetric_difference(self, other: "HashSet[T]") -> "HashSet[T]":
        """
        Return a new set with the elements in exactly one of the two sets.

        This is the union minus the intersection.
        """
        return self.union(other).difference(self.intersection(other))

    def map(self, func: Callable[[T], U]) -> "HashSet[U]":
        """
        Return a new set with func applied to every element.

        Results that compare equal collapse into one element, so the result can be smaller than this set.
        """
        logger.debug(f"Mapping over set with {len(self.data)} elements")
        result: HashSet[U] = HashSet()
        for elem in self.data:
            result.add(func(elem))
        return result

    def filter(self, predicate: Callable[[T], Any]) -> "HashSet[T]":
        """
        Return a new set with the elements for which predicate is truthy.
        """
        logger.debug(f"Filtering set with {len(self.data)} elements")
        result: HashSet[T] = self.__class__()
        for elem in self.data:
            if predicate(elem):
                result.data[elem] = None
        return result

    ############################################### Comparisons ####################################################

    def is_subset(self, other: "HashSet[T]") -> bool:
        """
        Return True if every element of this set is in other. The empty set is a subset of every set.
        """
        if len(self.data) > len(other.data):
            return False
        for elem in self.data:
            if elem not in other.data:
                return False
        return True

    def equals(self, other: "HashSet[T]") -> bool:
        """
        Return True if both sets hold exactly the same elements.

        Sizes are compared first, so sets of different sizes are rejected in O(1).
        """
        if len(self.data) != len(other.data):
            return False
        return self.is_subset(other)

    def to_list(self) -> list[T]:
        """
        Return a new list with every element exactly once, in no particular order.
        """
        return list(self.data)

    ############################################### Python protocols ####################################################

    def __contains__(self, elem: object) -> bool:
        return self.contains(elem)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __copy__(self) -> "HashSet[T]":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        """
        Equal to other HashSets with the same members. Regular sets and frozensets are compared by membership too.
        """
        if isinstance(other, HashSet):
            return self.equals(other)
        elif isinstance(other, (set, frozenset)):
            return len(self.data) == len(other) and all(elem in other for elem in self.data)
        return NotImplemented

    # Mutable, so not hashable (same as the built-in set)
    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: object) -> "HashSet[T]":
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> "HashSet[T]":
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> "HashSet[T]":
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> "HashSet[T]":
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.is_subset(other)

    def __repr__(self) -> str:
        if not self.data:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({', '.join(map(repr, self.data))})"
