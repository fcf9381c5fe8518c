"""
Native helpers: the element-mapper itself, plus the two little
functions every worked example seems to want to compose.
"""
from typing import Any, Callable, Iterable

def apply_on_elements(l: Iterable, f: Callable) -> list:
	"""
	A fresh list with f applied to each element of l, in order.
	The first exception f raises goes straight to the caller;
	no later element gets looked at.
	"""
	return [f(item) for item in l]

def length(x) -> int:
	return len(x)

def unique(x: Iterable) -> list[Any]:
	""" Distinct elements, in order of first appearance. """
	return list(dict.fromkeys(x))
