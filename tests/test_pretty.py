import io
import unittest
from complaint.pretty import pretty_format, pretty_print, as_line

def swapped_words(doc):
	doc.jump_to_line(12)
	doc.info("Error at line 12:")
	doc.line("time is window a but").add_underline(slice(8, 14), hint="This...").add_underline(slice(17, 20), hint="...and this...")
	doc.info("...should be swapped?")

EXPECTED = "\n".join([
	"Error at line 12:",
	"12 | time is window a but",
	"             ------   ---",
	"             This...",
	"                      ...and this...",
	"...should be swapped?",
])

class PrettyTests(unittest.TestCase):
	def test_format(self):
		self.assertEqual(EXPECTED, pretty_format(swapped_words))

	def test_print(self):
		out = io.StringIO()
		pretty_print(swapped_words, file=out)
		self.assertEqual(EXPECTED+"\n", out.getvalue())

	def test_indent_all_lines(self):
		text = pretty_format(swapped_words, indent_all_lines=True)
		self.assertTrue(text.startswith("   | Error at line 12:\n12 | "))
		self.assertTrue(text.endswith("\n   | ...should be swapped?"))

	def test_as_line(self):
		line = as_line("blubb").mark_error(slice(1, 3))
		self.assertTrue(line.numbered)
		self.assertEqual("1 | blubb\n     ^^", line.as_text())


if __name__ == '__main__':
	unittest.main()
