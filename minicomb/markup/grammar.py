"""
A worked example: a grammar for a tiny subset of XML, built entirely from the engine's combinators.

What you get: elements, either self-closing (`<br/>`) or open-and-close (`<p>...</p>`),
with double-quoted attributes and nested children. What you don't get: text content,
comments, entities, CDATA, namespaces, processing instructions, doctypes. It's a
demonstration, not a conforming XML processor. So `<a>hi</a>` fails, and so does
`<a> </a>`: whitespace only counts as padding around a child element.

The interesting part is `parent_element`. A closing tag has to name the same element as its
opening tag, which is not a context-free requirement. The `and_then` combinator handles it:
once the opening tag is parsed, we know the name, so we build a parser which insists on
exactly that closing tag.

Nesting is recursion, and recursion costs Python stack: each level of elements takes six
frames (wrap, either, and_then, map, left, repeat). Under the default recursion limit of
1000 that works out to roughly 150 levels. Past that, `element()` lets `RecursionError`
escape, and `document.parse_document` reports it as `NestingTooDeep`.
"""

__all__ = [
	'Element', 'quoted_string', 'attribute_pair', 'attributes', 'element_start',
	'single_element', 'open_element', 'close_element', 'parent_element', 'element',
]

from typing import NamedTuple

from ..engine.interface import Parser
from ..engine.combinators import map, pair, left, right, either, zero_or_more, pred, and_then
from ..engine.primitives import match_literal, any_char, identifier, space1, whitespace_wrap


class Element(NamedTuple):
	name: str
	attributes: tuple[tuple[str, str], ...] = ()
	children: tuple["Element", ...] = ()


def _make_element(start) -> Element:
	name, attrs = start
	return Element(name, tuple(attrs))


def quoted_string() -> Parser:
	return right(
		match_literal('"'),
		left(
			zero_or_more(pred(any_char, lambda c: c != '"')),
			match_literal('"'),
		),
	).map(''.join)

def attribute_pair() -> Parser:
	return pair(identifier, right(match_literal('='), quoted_string()))

def attributes() -> Parser:
	return zero_or_more(right(space1, attribute_pair()))

def element_start() -> Parser:
	return right(match_literal('<'), pair(identifier, attributes()))

def single_element() -> Parser:
	return map(left(element_start(), match_literal('/>')), _make_element)

def open_element() -> Parser:
	return map(left(element_start(), match_literal('>')), _make_element)

def close_element(expected_name:str) -> Parser:
	tag = right(match_literal('</'), left(identifier, match_literal('>')))
	return pred(tag, lambda name: name == expected_name)

def parent_element() -> Parser:
	def contents(opened:Element) -> Parser:
		children = left(zero_or_more(element()), close_element(opened.name))
		return map(children, lambda kids: opened._replace(children=tuple(kids)))
	return and_then(open_element(), contents)

def element() -> Parser:
	"""
	The entry point. Every nested call happens inside `parent_element`'s `and_then`,
	which only runs after an opening tag has been consumed, so the recursion always
	makes progress.
	"""
	return whitespace_wrap(either(single_element(), parent_element()))
