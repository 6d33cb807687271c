"""
Bubble sort over persistent lists, written as two mutually recursive
pure functions in place of the usual pair of nested loops.

Recursion depth is proportional to the length of the list, so lists
much longer than sys.getrecursionlimit() raise RecursionError.  Use
bubblecons.cps.bubblesort_cps for those.
"""

import logging
import typing as ty

from bubblecons.plist import PList, Cons

log = logging.getLogger(__name__)


class SupportsLessThan(ty.Protocol):
    def __lt__(self, other: ty.Any, /) -> bool: ...


O = ty.TypeVar('O', bound=SupportsLessThan)


def inner(xs: PList[O]) -> PList[O]:
    """One bubble pass: the larger of each compared pair moves on."""
    match xs:
        case Cons(a, Cons(b, rest)):
            if a < b:
                return inner(rest.cons(b)).cons(a)
            else:
                return inner(rest.cons(a)).cons(b)
        case _:
            # empty or a single element
            return xs


def outer(xs: PList[O]) -> PList[O]:
    match xs:
        case Cons(x, xs2):
            # the tail comes back sorted, so one pass places x
            return inner(outer(xs2).cons(x))
        case _:
            return xs


def bubblesort(xs: PList[O]) -> PList[O]:
    if log.isEnabledFor(logging.DEBUG):
        log.debug('bubblesort: sorting %d elements', len(xs))
    return outer(xs)
