"""
This module defines the run-time function values the combinators build.
Plain Python callables play themselves, but composites and partial maps need a little help.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from .primitive import apply_on_elements

ARGS = Sequence[Any]

def _sole(fn, args: ARGS):
	""" Unary function values take exactly one argument. """
	if len(args) != 1:
		raise TypeError("%s takes exactly one argument (%d given)" % (fn, len(args)))
	return args[0]

def name_of(fn) -> str:
	""" Something readable to call a function value in diagnostics. """
	if isinstance(fn, Function): return str(fn)
	return getattr(fn, "__name__", None) or repr(fn)

###############################################################################

class Function(ABC):
	""" A run-time object that can be applied with arguments. """
	__slots__ = ()
	
	@abstractmethod
	def apply(self, args: ARGS) -> Any: pass
	
	def __call__(self, *args):
		return self.apply(args)

class Identity(Function):
	""" The neutral element of composition. """
	__slots__ = ()
	
	def __str__(self): return "identity"
	
	def apply(self, args: ARGS) -> Any:
		return _sole(self, args)

IDENTITY = Identity()

class Composite(Function):
	"""
	Two function values, chained so the result of the inner one feeds the outer one.
	Neither is consulted until the composite itself gets called.
	"""
	__slots__ = ("_outer", "_inner")
	
	def __init__(self, outer: Callable, inner: Callable):
		self._outer = outer
		self._inner = inner
	
	@property
	def outer(self) -> Callable: return self._outer
	
	@property
	def inner(self) -> Callable: return self._inner
	
	def unchain(self) -> tuple[list, Callable]:
		"""
		The left fold nests composites down the outer side. Flatten that spine:
		inner functions in the order they apply, then whatever sits at the bottom.
		"""
		stages, fn = [], self
		while isinstance(fn, Composite):
			stages.append(fn._inner)
			fn = fn._outer
		return stages, fn
	
	def __str__(self):
		stages, base = self.unchain()
		# The fold seed adds nothing to the picture.
		names = [name_of(fn) for fn in [base, *reversed(stages)] if fn is not IDENTITY]
		return " . ".join(names) or str(IDENTITY)
	
	def apply(self, args: ARGS) -> Any:
		stages, base = self.unchain()
		value = stages[0](*args)
		for fn in stages[1:]: value = fn(value)
		return base(value)

class PartialMap(Function):
	""" The element-mapper with its function argument fixed in advance. """
	__slots__ = ("_fn",)
	
	def __init__(self, fn: Callable):
		self._fn = fn
	
	@property
	def fn(self) -> Callable: return self._fn
	
	def __str__(self):
		return "map(%s)" % name_of(self._fn)
	
	def apply(self, args: ARGS) -> list:
		return apply_on_elements(_sole(self, args), self._fn)
