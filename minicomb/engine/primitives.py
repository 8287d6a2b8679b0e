""" The leaves of any grammar: parsers which look at characters rather than at other parsers. """

__all__ = [
	'match_literal', 'any_char', 'identifier',
	'whitespace_char', 'space0', 'space1', 'whitespace_wrap',
]

from .interface import Parser, Success, Failure, ParseResult, MetaError, check_parser
from .combinators import pred, zero_or_more, one_or_more
from ..support.slices import Slice


def is_ascii_letter(c:str) -> bool: return c.isascii() and c.isalpha()
def is_identifier_char(c:str) -> bool: return c.isascii() and (c.isalnum() or c == '-')


class Literal(Parser):
	__slots__ = ('expected',)
	def __init__(self, expected:str):
		if not isinstance(expected, str) or not expected:
			raise MetaError("A literal must be a non-empty string; got %r"%(expected,))
		self.expected = expected
	def parse(self, view:Slice) -> ParseResult:
		if view.startswith(self.expected): return Success(view.advance(len(self.expected)), None)
		return Failure(view)
	def __repr__(self): return 'match_literal(%r)'%self.expected


class AnyChar(Parser):
	__slots__ = ()
	def parse(self, view:Slice) -> ParseResult:
		c = view.first()
		if c: return Success(view.advance(1), c)
		return Failure(view)
	def __repr__(self): return 'any_char'


class Identifier(Parser):
	__slots__ = ()
	def parse(self, view:Slice) -> ParseResult:
		if not is_ascii_letter(view.first()): return Failure(view)
		size = 1 + view.advance(1).take_while(is_identifier_char)
		rest = view.advance(size)
		return Success(rest, view.between(rest))
	def __repr__(self): return 'identifier'


def match_literal(expected:str) -> Parser:
	""" Match exactly `expected`. The value is None. """
	return Literal(expected)

any_char = AnyChar()
identifier = Identifier()

whitespace_char = pred(any_char, str.isspace)
space0 = zero_or_more(whitespace_char)
space1 = one_or_more(whitespace_char)


class WhitespaceWrapped(Parser):
	"""
	Same result as `right(space0, left(p, space0))`, but the whitespace gets skipped in place.
	This sits on every level of a recursive grammar, so it matters how many frames it costs.
	"""
	__slots__ = ('inner',)
	def __init__(self, inner:Parser): self.inner = check_parser(inner)
	def parse(self, view:Slice) -> ParseResult:
		result = self.inner.parse(view.advance(view.take_while(str.isspace)))
		if not result.ok: return result
		rest = result.remaining
		return Success(rest.advance(rest.take_while(str.isspace)), result.value)

def whitespace_wrap(p:Parser) -> Parser:
	""" Skip optional whitespace on either side of `p`. The value is `p`'s. """
	return WhitespaceWrapped(p)
