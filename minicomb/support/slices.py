"""
Python strings slice by copying. That's usually fine, but a combinator parser slices
its input at nearly every step, and copying the whole tail of a document each time
a single angle-bracket gets consumed turns a linear algorithm quadratic.

So instead, the parsers pass around a `Slice`: a backing string plus a starting offset.
Consuming input means making a new `Slice` with a bigger offset. Questions about the
front of the input (does it start with this literal? what's the next character?) get
answered against the backing string directly, at the offset.

For convenience in tests and error reports, a `Slice` compares equal to a plain string
with the same remaining content, and `str(...)` gives you that content. That last one
DOES copy, so the parsers themselves never call it.
"""

__all__ = ['Slice']


class Slice:
	""" An immutable view of everything in `text` from offset `start` onward. """
	__slots__ = ('text', 'start')

	def __init__(self, text:str, start:int=0):
		assert 0 <= start <= len(text), start
		object.__setattr__(self, 'text', text)
		object.__setattr__(self, 'start', start)

	def __setattr__(self, key, value): raise AttributeError("Slice is immutable")

	@property
	def offset(self) -> int: return self.start

	def __len__(self): return len(self.text) - self.start
	def __bool__(self): return self.start < len(self.text)

	def first(self) -> str:
		""" The next character, or the empty string at end of input. """
		return self.text[self.start:self.start+1]

	def startswith(self, prefix:str) -> bool: return self.text.startswith(prefix, self.start)

	def advance(self, count:int) -> "Slice":
		""" Consume `count` characters. Never goes past the end. """
		assert count >= 0, count
		return Slice(self.text, min(self.start + count, len(self.text)))

	def take_while(self, predicate) -> int:
		""" How many characters from the front satisfy `predicate`? """
		text, i = self.text, self.start
		while i < len(text) and predicate(text[i]): i += 1
		return i - self.start

	def between(self, later:"Slice") -> str:
		""" The text consumed getting from here to some later view of the same text. """
		assert later.text is self.text and later.start >= self.start
		return self.text[self.start:later.start]

	def is_suffix_of(self, other:"Slice") -> bool:
		return self.text is other.text and self.start >= other.start

	def __str__(self): return self.text[self.start:]
	def __repr__(self): return 'Slice(%r @%d)'%(self.text[self.start:self.start+20], self.start)

	def __eq__(self, other):
		if isinstance(other, Slice):
			if self.text is other.text: return self.start == other.start
			other = str(other)
		if isinstance(other, str):
			return len(self) == len(other) and self.text.endswith(other)
		return NotImplemented

	def __hash__(self): return hash(str(self))
