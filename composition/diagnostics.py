"""
Caller-side help for figuring out why a composed function fell over.

The combinators themselves never catch anything: a failure inside a composite
comes straight out of the call, exactly as the constituent raised it. When that
is not enough to see which stage went wrong, run the same call through
`trace_call` with a `Report`, which walks the composite one stage at a time,
keeps a trail, and files an illustrated issue before letting the exception go.
"""
import sys, random, reprlib
from typing import Any, Callable, NamedTuple, Sequence

from boozetools.support.foundation import Visitor

from .primitive import apply_on_elements
from .values import Composite, Identity, PartialMap, name_of

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]
	exclamations = ['Drat', 'Bother', 'Fiddlesticks', 'Good Grief', 'Rats', 'Nuts', 'Great Scott']
	resignations = [
		'Something upstream did not fit.',
		'The chain came apart.',
		'One link refused its input.',
		'I cannot continue.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, exclamations, resignations)))

def _brief(value) -> str:
	return reprlib.repr(value)

def _describe(ex: BaseException) -> str:
	text = str(ex)
	return "%s: %s" % (type(ex).__name__, text) if text else type(ex).__name__

class Stage(NamedTuple):
	""" One call of a constituent function, as the tracer saw it. """
	name: str
	where: tuple  # Element indices, outermost map first.
	ok: bool
	outcome: str

class Pic:
	def __init__(self, intro:str, lines:list[str], footer=()):
		self._intro, self._lines, self._footer = intro, lines, footer
	def also(self, line:str): self._lines.append(line)
	def as_text(self):
		return '\n'.join([self._intro, "", *self._lines, *self._footer])

class Report:
	""" Collects issues; optionally narrates to stderr along the way. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> tuple[Pic, ...]: return tuple(self._issues)

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		"""
		For tests and callers that expect a clean run.
		The AssertionError carries the text of every issue.
		"""
		if self._issues:
			self.complain_to_console()
			details = "\n\n".join(pic.as_text() for pic in self._issues)
			raise AssertionError("%s\n\n%s" % (message, details))

	# Methods the stage tracer calls:
	def stage_failed(self, trail:Sequence[Stage], ex:Exception):
		intro = "A composed function failed with %s" % _describe(ex)
		lines = [_illustrate(number, stage) for number, stage in enumerate(trail, 1)]
		if all(stage.ok for stage in trail):
			footer = ["No constituent raised this; it came from between the stages (e.g. a container that could not be walked)."]
		else:
			footer = []
		self.issue(Pic(intro, lines, footer))

def _illustrate(number:int, stage:Stage) -> str:
	marker = ' ' if stage.ok else '>'
	return "%s% 5d | %s%s -> %s" % (marker, number, stage.name, _where_text(stage.where), stage.outcome)

def _where_text(where:tuple) -> str:
	return ''.join('[%d]' % i for i in where)

def _bemoan(issues:Sequence[Pic]):
	if not issues: return
	print(_outburst(), file=sys.stderr)
	for number, pic in enumerate(issues, 1):
		print("--- issue %d of %d ---" % (number, len(issues)), file=sys.stderr)
		print(pic.as_text(), file=sys.stderr)
	sys.stderr.flush()

###############################################################################

_STRUCTURAL = (Identity, Composite, PartialMap)

class StageTracer(Visitor):
	"""
	Evaluates a function value the long way around: it takes composites and
	partial maps apart and calls each plain constituent itself, so it knows
	which one was running when something broke. The answer is the same
	as calling the function value directly.
	"""
	trail: list[Stage]

	def __init__(self, report:Report):
		self._report = report
		self._where = []
		self.trail = []

	def run(self, fn:Callable, value:Any) -> Any:
		try: return self.evaluate(fn, value)
		except Exception as ex:
			self._report.stage_failed(self.trail, ex)
			raise

	def evaluate(self, fn:Callable, value:Any) -> Any:
		if isinstance(fn, _STRUCTURAL): return self.visit(fn, value)
		else: return self._call(fn, value)

	def visit_Identity(self, _fn:Identity, value):
		return value

	def visit_Composite(self, fn:Composite, value):
		stages, base = fn.unchain()
		for each in stages: value = self.evaluate(each, value)
		return self.evaluate(base, value)

	def visit_PartialMap(self, fn:PartialMap, container):
		self._report.info("mapping %s over %s" % (name_of(fn.fn), _brief(container)))
		return apply_on_elements(enumerate(container), lambda pair: self._element(fn.fn, *pair))

	def _element(self, fn:Callable, index:int, item):
		self._where.append(index)
		try: return self.evaluate(fn, item)
		finally: self._where.pop()

	def _call(self, fn:Callable, value):
		name, where = name_of(fn), tuple(self._where)
		try: result = fn(value)
		except Exception as ex:
			self.trail.append(Stage(name, where, False, "raised "+_describe(ex)))
			raise
		stage = Stage(name, where, True, _brief(result))
		self.trail.append(stage)
		self._report.info("stage %d: %s%s -> %s" % (len(self.trail), name, _where_text(where), stage.outcome))
		return result

def trace_call(fn:Callable, value:Any, report:Report) -> Any:
	"""
	Same answer as fn(value), but on failure the report gets an issue
	showing every stage evaluated so far, with the guilty one marked.
	The original exception still propagates.
	"""
	return StageTracer(report).run(fn, value)
