"""
The public face of the package: building new function values out of old ones.

Nothing here calls the functions it is given. Construction only wires them
together; all the work (and any failure) happens when the result is invoked.
"""
from functools import reduce
from typing import Callable, Iterable

from .primitive import apply_on_elements
from .values import IDENTITY, Composite, PartialMap

__all__ = ["identity", "compose_once", "compose", "pipe", "apply_on_elements", "partial_apply"]

identity = IDENTITY

def compose_once(f: Callable, g: Callable) -> Composite:
	""" h(*args) = f(g(*args)) """
	return Composite(f, g)

def compose(fns: Iterable[Callable]) -> Callable:
	"""
	Right-to-left composition: compose([f, g, h])(x) == f(g(h(x))).
	
	This is a left fold over compose_once seeded with the identity,
	so the empty sequence composes to the identity with no special case.
	"""
	return reduce(compose_once, fns, IDENTITY)

def pipe(fns: Iterable[Callable]) -> Callable:
	""" Left-to-right composition: pipe([f, g, h])(x) == h(g(f(x))). """
	return compose(reversed(list(fns)))

def partial_apply(f: Callable) -> PartialMap:
	""" A one-argument function that maps f over whatever container it is given. """
	return PartialMap(f)
