from .errors import *
from .plist import PList, Cons, Nil, NIL, plist, cons
from .sort import bubblesort
from .cps import bubblesort_cps
from .text import render, print_list, parse
