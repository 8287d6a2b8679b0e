"""
The boundary between the parser engine and an application which just wants a tree.

Inside the engine, failure is a value and leftover input is nobody's business.
Out here, somebody has to decide. `parse_document` decides like this:

	A failed parse raises `XMLSyntaxError`, which carries the failure view.
	Nesting deeper than the Python stack allows raises `NestingTooDeep`, which carries the whole input.
	Trailing input after the root element raises `TrailingContentError` if you're strict,
	or issues a warning and gives you the tree anyway if you're not.

Turning the failure view into a pretty message with line numbers is the application's
job. The exception gives you the offset and the remaining text to work from.
"""

import sys, warnings

from ..engine.interface import ParseError, as_slice
from .grammar import Element, element

VERBOSE = False

class XMLSyntaxError(ParseError):
	def __init__(self, remaining, message="Malformed element"):
		super().__init__(message, str(remaining)[:40])
		self.remaining = remaining
		self.offset = remaining.offset

class TrailingContentError(XMLSyntaxError): pass

class NestingTooDeep(XMLSyntaxError):
	""" The document nests deeper than the Python stack allows. `remaining` is the whole input. """

_root = element()

def count_elements(root:Element) -> int:
	return 1 + sum(count_elements(child) for child in root.children)

def parse_document(text:str, *, strict=True) -> Element:
	view = as_slice(text)
	try: result = _root.parse(view)
	except RecursionError:
		raise NestingTooDeep(view, "Elements nest too deeply to parse") from None
	if not result.ok: raise XMLSyntaxError(result.remaining)
	if result.remaining:
		if strict: raise TrailingContentError(result.remaining, "Content after the root element")
		warnings.warn("Ignoring %d characters after the root element at offset %d"%(len(result.remaining), result.remaining.offset))
	if VERBOSE: print("Parsed <%s>: %d element(s) in %d characters."%(
		result.value.name, count_elements(result.value), result.remaining.offset - view.offset
	), file=sys.stderr)
	return result.value
