import dataclasses as dc
import typing as ty
from collections.abc import Iterable, Reversible

from bubblecons.errors import EmptyListError

T = ty.TypeVar('T')


class PList(ty.Generic[T]):
    """
    Immutable singly-linked list: either a Cons cell or Nil.

    Prepending never touches the existing cells, so any number of lists
    may share the same tail.  Everything here walks the list with a loop
    rather than recursion so it works on lists of any length.
    """
    __slots__ = ()

    def cons(self, head: T) -> 'Cons[T]':
        return Cons(head, self)

    # Indirectly implemented as static method because bound generators
    # retain a reference to self, which would keep the whole list alive
    # for as long as the iterator is.
    @staticmethod
    def _iter(ll):
        while ll:
            yield ll.head
            ll = ll.tail

    def __iter__(self) -> ty.Iterator[T]:
        return self._iter(self)

    def __len__(self):
        return sum(1 for _ in self)

    def __eq__(self, other):
        if not isinstance(other, PList):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f'plist({list(self)!r})'


@dc.dataclass(frozen=True, eq=False, repr=False)
class Cons(PList[T]):
    __slots__ = 'head', 'tail'
    head: T
    tail: PList[T]

    def __bool__(self):
        return True


@dc.dataclass(frozen=True, eq=False, repr=False)
class Nil(PList[T]):
    __slots__ = ()

    @property
    def head(self):
        raise EmptyListError.empty(attr='head')

    @property
    def tail(self):
        raise EmptyListError.empty(attr='tail')

    def __bool__(self):
        return False


NIL: Nil[ty.Any] = Nil()


def plist(iterable: Iterable[T] = ()) -> PList[T]:
    # Built back to front so the list comes out in iteration order
    if not isinstance(iterable, Reversible):
        iterable = list(iterable)

    xs: PList[T] = NIL
    for item in reversed(iterable):
        xs = Cons(item, xs)
    return xs


def cons(xs: PList[T], head: T) -> Cons[T]:
    return xs.cons(head)
