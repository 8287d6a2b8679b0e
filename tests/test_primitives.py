""" The leaf parsers, one at a time. """
import unittest
from minicomb.engine.interface import Success, Failure, MetaError
from minicomb.engine.primitives import (
	match_literal, any_char, identifier, whitespace_char, space0, space1, whitespace_wrap,
)


class TestPrimitives(unittest.TestCase):
	def test_00_literal(self):
		parse_joe = match_literal("Joe")
		self.assertEqual(Success("", None), parse_joe("Joe"))
		self.assertEqual(Success("! Joseph!", None), parse_joe("Joe! Joseph!"))
		self.assertEqual(Failure("Robert"), parse_joe("Robert"))
		self.assertEqual(Failure("Jo"), parse_joe("Jo"))

	def test_01_empty_literal_is_a_mistake(self):
		with self.assertRaises(MetaError):
			match_literal("")

	def test_02_any_char(self):
		self.assertEqual(Success("bc", "a"), any_char("abc"))
		self.assertEqual(Failure(""), any_char(""))

	def test_03_identifier(self):
		for text, expect in [
			("i-am-an-identifier", Success("", "i-am-an-identifier")),
			("not entirely an identifier", Success(" entirely an identifier", "not")),
			("h1-2x>", Success(">", "h1-2x")),
			("!not an identifier", Failure("!not an identifier")),
			("1st", Failure("1st")),
			("-dash", Failure("-dash")),
			("été", Failure("été")),
			("", Failure("")),
		]:
			with self.subTest(text=text):
				self.assertEqual(expect, identifier(text))

	def test_04_whitespace(self):
		self.assertEqual(Success("x", " "), whitespace_char(" x"))
		self.assertEqual(Failure("x"), whitespace_char("x"))
		self.assertEqual(Success("x", []), space0("x"))
		self.assertEqual(Success("x", [" ", "\t", "\n"]), space0(" \t\nx"))
		self.assertEqual(Failure("x"), space1("x"))
		self.assertEqual(Success("x", [" ", " "]), space1("  x"))

	def test_05_whitespace_wrap(self):
		p = whitespace_wrap(identifier)
		self.assertEqual(Success("def", "abc"), p("  abc  def"))
		self.assertEqual(Success("", "abc"), p("abc"))
		self.assertEqual(Failure("!"), p("  !"))

	def test_06_remaining_input_is_a_view(self):
		text = "hello world"
		result = identifier(text)
		self.assertIs(text, result.remaining.text)
		self.assertEqual(5, result.remaining.offset)

	def test_07_parsers_are_reusable(self):
		for _ in range(2):
			self.assertEqual(Success(" b", "a"), identifier("a b"))


if __name__ == '__main__':
	unittest.main()
