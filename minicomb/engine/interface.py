"""
Parser Engine Interface Definitions.

A parser is a thing you can ask one question: "Given this input, what do you make of it?"
The answer is a `ParseResult`, which comes in exactly two flavors:

	`Success(remaining, value)` -- here's what I found, and here's what I didn't eat.
	`Failure(remaining)` -- I got stuck here.

That's the whole of the error-reporting story inside the engine. There's no message, no
error code, no line number: the failure view IS the diagnosis. Parse failures never
raise exceptions; they're ordinary values that combinators inspect and pass along.
Exceptions are reserved for mistakes in how a grammar got put together (`MetaError`)
and for the top-level boundary where some application decides a failure is final.
"""

from abc import ABC, abstractmethod
from typing import Any, NamedTuple, Union, Callable

from ..support.slices import Slice

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """

class ParseError(LanguageError): pass

class MetaError(LanguageError):
	""" This gets raised if there's something wrong in the definition of a parser. """


class Success(NamedTuple):
	remaining: Slice
	value: Any
	ok = True

class Failure(NamedTuple):
	remaining: Slice
	ok = False

ParseResult = Union[Success, Failure]


def as_slice(text:Union[str, Slice]) -> Slice:
	if isinstance(text, Slice): return text
	if isinstance(text, str): return Slice(text)
	raise TypeError("Parsers consume str or Slice, not %s"%type(text).__name__)

def require_callable(fn, role:str):
	""" Push failures to the fore: a bogus callback should blow up when the grammar gets built, not mid-parse. """
	if not callable(fn): raise MetaError("%s must be callable; got %r"%(role, fn))


class Parser(ABC):
	"""
	The one capability: `parse(view) -> ParseResult`.

	Concrete parsers hold only other parsers and plain values, and never change after
	construction, so it's safe to build a grammar once and share it freely.

	For convenience, you can call a parser directly on a `str` (or `Slice`), and the
	three most common combinators are available in fluent form.
	"""
	__slots__ = ()

	@abstractmethod
	def parse(self, view:Slice) -> ParseResult:
		""" Must return a result whose remaining view is a suffix of `view`. """

	def __call__(self, text:Union[str, Slice]) -> ParseResult: return self.parse(as_slice(text))

	def map(self, fn:Callable) -> "Parser":
		from . import combinators
		return combinators.map(self, fn)

	def pred(self, predicate:Callable) -> "Parser":
		from . import combinators
		return combinators.pred(self, predicate)

	def and_then(self, fn:Callable) -> "Parser":
		from . import combinators
		return combinators.and_then(self, fn)


def check_parser(p, role:str='argument') -> "Parser":
	if not isinstance(p, Parser): raise MetaError("%s must be a Parser; got %r"%(role, p))
	return p
