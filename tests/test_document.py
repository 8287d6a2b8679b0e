import io
import sys
import unittest
import contextlib
from minicomb.markup import document
from minicomb.markup.grammar import Element


class TestParseDocument(unittest.TestCase):
	def test_00_happy_path(self):
		root = document.parse_document('  <a k="v"><b/></a>\n')
		self.assertEqual(Element("a", (("k", "v"),), (Element("b"),)), root)
		self.assertEqual(2, document.count_elements(root))

	def test_01_syntax_error_carries_the_failure_view(self):
		text = "<top><bottom/></middle>"
		with self.assertRaises(document.XMLSyntaxError) as cm:
			document.parse_document(text)
		self.assertEqual("</middle>", cm.exception.remaining)
		self.assertEqual(text.index("</middle>"), cm.exception.offset)
		self.assertNotIsInstance(cm.exception, document.TrailingContentError)

	def test_02_trailing_content(self):
		with self.assertRaises(document.TrailingContentError) as cm:
			document.parse_document("<a/><b/>")
		self.assertEqual("<b/>", cm.exception.remaining)
		self.assertEqual(4, cm.exception.offset)

	def test_03_trailing_content_when_lenient(self):
		with self.assertWarns(UserWarning):
			root = document.parse_document("<a/>junk", strict=False)
		self.assertEqual(Element("a"), root)

	def test_04_verbose(self):
		saved = document.VERBOSE
		document.VERBOSE = True
		try:
			err = io.StringIO()
			with contextlib.redirect_stderr(err):
				document.parse_document("<a><b/><c/></a>")
		finally:
			document.VERBOSE = saved
		self.assertIn("<a>: 3 element(s)", err.getvalue())

	def test_05_moderate_nesting(self):
		depth = 100
		root = document.parse_document("<a>"*depth + "</a>"*depth)
		self.assertEqual(depth, document.count_elements(root))

	def test_06_nesting_too_deep(self):
		for depth in [200, sys.getrecursionlimit()]:
			text = "<a>"*depth + "</a>"*depth
			with self.subTest(depth=depth):
				with self.assertRaises(document.NestingTooDeep) as cm:
					document.parse_document(text)
				self.assertEqual(text, cm.exception.remaining)
				self.assertEqual(0, cm.exception.offset)
				self.assertIsInstance(cm.exception, document.XMLSyntaxError)


if __name__ == '__main__':
	unittest.main()
