"""
Combinators: functions which take parsers and make new parsers.

Backtracking here is structural, and you declare it yourself:

	`either` is the only combinator which retries from the original input.
	`pred` restores its original input when it rejects a value, so that a
	sibling alternative gets a clean start.

Everything else passes the first failure along unchanged. In particular, `pair` does NOT
back up past a first stage that succeeded: if the second stage fails, you get the second
stage's failure view, partway into the input. If you need to try something else from the
top, put the `either` at the level where the alternatives actually diverge.
"""

__all__ = [
	'map', 'pair', 'left', 'right', 'either', 'one_or_more', 'zero_or_more',
	'pred', 'and_then', 'lazy',
]

from typing import Callable

from .interface import Parser, Success, Failure, ParseResult, require_callable, check_parser
from ..support.slices import Slice


class Mapped(Parser):
	__slots__ = ('inner', 'fn')
	def __init__(self, inner:Parser, fn:Callable):
		require_callable(fn, 'map function')
		self.inner, self.fn = check_parser(inner), fn
	def parse(self, view:Slice) -> ParseResult:
		result = self.inner.parse(view)
		if not result.ok: return result
		return Success(result.remaining, self.fn(result.value))


class Paired(Parser):
	__slots__ = ('first', 'second')
	def __init__(self, first:Parser, second:Parser):
		self.first, self.second = check_parser(first), check_parser(second)
	def parse(self, view:Slice) -> ParseResult:
		one = self.first.parse(view)
		if not one.ok: return one
		two = self.second.parse(one.remaining)
		if not two.ok: return two # Deliberately no backtracking past `first`.
		return Success(two.remaining, self.combine(one.value, two.value))
	def combine(self, a, b): return a, b

class KeepLeft(Paired):
	__slots__ = ()
	def combine(self, a, b): return a

class KeepRight(Paired):
	__slots__ = ()
	def combine(self, a, b): return b


class Either(Parser):
	__slots__ = ('first', 'second')
	def __init__(self, first:Parser, second:Parser):
		self.first, self.second = check_parser(first), check_parser(second)
	def parse(self, view:Slice) -> ParseResult:
		result = self.first.parse(view)
		if result.ok: return result
		return self.second.parse(view)


class Repeated(Parser):
	"""
	Greedy repetition with a lower bound of zero or one.
	An application which succeeds without consuming anything ends the loop
	(after contributing its value) because it would otherwise never end.
	"""
	__slots__ = ('inner', 'at_least_one')
	def __init__(self, inner:Parser, at_least_one:bool):
		self.inner, self.at_least_one = check_parser(inner), at_least_one
	def parse(self, view:Slice) -> ParseResult:
		values = []
		here = view
		while True:
			result = self.inner.parse(here)
			if not result.ok: break
			values.append(result.value)
			if result.remaining.offset == here.offset: break
			here = result.remaining
		if self.at_least_one and not values: return Failure(view)
		return Success(here, values)


class Filtered(Parser):
	__slots__ = ('inner', 'predicate')
	def __init__(self, inner:Parser, predicate:Callable):
		require_callable(predicate, 'predicate')
		self.inner, self.predicate = check_parser(inner), predicate
	def parse(self, view:Slice) -> ParseResult:
		result = self.inner.parse(view)
		if not result.ok: return result
		if self.predicate(result.value): return result
		return Failure(view)


class Dependent(Parser):
	__slots__ = ('inner', 'fn')
	def __init__(self, inner:Parser, fn:Callable):
		require_callable(fn, 'and_then function')
		self.inner, self.fn = check_parser(inner), fn
	def parse(self, view:Slice) -> ParseResult:
		result = self.inner.parse(view)
		if not result.ok: return result
		follow = check_parser(self.fn(result.value), 'and_then result')
		return follow.parse(result.remaining)


class Lazy(Parser):
	"""
	Stands in for a parser which can't be built yet, usually because it refers to itself.
	The thunk runs the first time the parser does. Rebuilding is harmless, so there's no lock.
	"""
	__slots__ = ('thunk', 'built')
	def __init__(self, thunk:Callable[[], Parser]):
		require_callable(thunk, 'lazy thunk')
		self.thunk, self.built = thunk, None
	def parse(self, view:Slice) -> ParseResult:
		if self.built is None: self.built = check_parser(self.thunk(), 'lazy thunk result')
		return self.built.parse(view)


def map(p:Parser, fn:Callable) -> Parser:
	""" Transform the value of a successful parse with `fn`. Failures pass through. """
	return Mapped(p, fn)

def pair(p1:Parser, p2:Parser) -> Parser:
	""" `p1` then `p2`; the value is the tuple of both values. """
	return Paired(p1, p2)

def left(p1:Parser, p2:Parser) -> Parser:
	""" Like `pair`, but keep only the first value. """
	return KeepLeft(p1, p2)

def right(p1:Parser, p2:Parser) -> Parser:
	""" Like `pair`, but keep only the second value. """
	return KeepRight(p1, p2)

def either(p1:Parser, p2:Parser) -> Parser:
	""" Try `p1`; if it fails, try `p2` from the same starting point. """
	return Either(p1, p2)

def one_or_more(p:Parser) -> Parser: return Repeated(p, True)
def zero_or_more(p:Parser) -> Parser: return Repeated(p, False)

def pred(p:Parser, predicate:Callable) -> Parser:
	""" Accept `p`'s value only if `predicate(value)` holds; otherwise fail where `p` started. """
	return Filtered(p, predicate)

def and_then(p:Parser, fn:Callable) -> Parser:
	""" Run `p`, then whatever parser `fn(value)` returns, on the rest of the input. """
	return Dependent(p, fn)

def lazy(thunk:Callable[[], Parser]) -> Parser: return Lazy(thunk)
