"""
Continuation-passing version of bubblecons.sort.

Each step returns a Bounce naming the next call instead of making it,
and trampoline() runs the bounces in a loop.  Pending work lives in the
chain of continuation closures on the heap, so the Python stack stays
flat however long the list is.
"""

import logging
import typing as ty

from bubblecons.plist import PList, Cons
from bubblecons.sort import O

log = logging.getLogger(__name__)

Continuation = ty.Callable[[PList[O]], 'Step']


class Bounce:
    __slots__ = 'func', 'args'

    def __init__(self, func, *args):
        self.func = func
        self.args = args

    def __repr__(self):
        return f'Bounce({self.func.__name__}, {len(self.args)} args)'


Step = Bounce | PList


def identity(xs: PList[O]) -> PList[O]:
    return xs


def trampoline(step: Step) -> PList:
    while isinstance(step, Bounce):
        step = step.func(*step.args)
    return step


def inner_k(xs: PList[O], k: Continuation) -> Step:
    match xs:
        case Cons(a, Cons(b, rest)):
            if a < b:
                return Bounce(inner_k, rest.cons(b), lambda ys: Bounce(k, ys.cons(a)))
            else:
                return Bounce(inner_k, rest.cons(a), lambda ys: Bounce(k, ys.cons(b)))
        case _:
            return Bounce(k, xs)


def outer_k(xs: PList[O], k: Continuation) -> Step:
    match xs:
        case Cons(x, xs2):
            return Bounce(outer_k, xs2, lambda ys: Bounce(inner_k, ys.cons(x), k))
        case _:
            return Bounce(k, xs)


def bubblesort_cps(xs: PList[O]) -> PList[O]:
    if log.isEnabledFor(logging.DEBUG):
        log.debug('bubblesort_cps: sorting %d elements', len(xs))
    return trampoline(outer_k(xs, identity))
