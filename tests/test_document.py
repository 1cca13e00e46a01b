import unittest
from complaint import palette
from complaint.annotated import AnnotatedLine
from complaint.document import Document, digit_count
from complaint.interfaces import InvalidLineNumberError, InvalidArgumentError


class NumberingTests(unittest.TestCase):
	def setUp(self) -> None:
		self.doc = Document()

	def test_mistake(self):
		self.doc.jump_to_line(8)
		self.doc.line("mistaeke").mark_error(slice(0, 3), hint="bad")
		self.assertEqual("8  | mistaeke\n     ^^^\n     bad", self.doc.render())

	def test_mistake_in_color(self):
		self.doc.set_color(True)
		self.doc.jump_to_line(8)
		self.doc.line("mistaeke").mark_error(slice(0, 3), hint="bad")
		expect = "8  | mistaeke\n     %s^^^%s\n     %sbad%s"%(palette.ERROR, palette.RESET, palette.ERROR, palette.RESET)
		self.assertEqual(expect, self.doc.render())

	def test_skip_notice(self):
		self.doc.jump_to_line(14)
		self.doc.line("x")
		self.doc.jump_to_line(20)
		self.doc.line("y")
		self.assertEqual("14 | x\n... (5 lines not shown)\n20 | y", self.doc.render())

	def test_no_notice_on_first_jump(self):
		self.doc.jump_to_line(5)
		self.doc.line("x")
		self.assertEqual("5  | x", self.doc.render())

	def test_no_notice_if_asked(self):
		self.doc.jump_to_line(14)
		self.doc.line("x")
		self.doc.jump_to_line(20, report_skip=False)
		self.doc.line("y")
		self.assertEqual("14 | x\n20 | y", self.doc.render())

	def test_no_notice_for_a_short_hop(self):
		self.doc.jump_to_line(14)
		self.doc.line("x")
		self.doc.jump_to_line(16)
		self.assertEqual(1, len(self.doc.blocks()))

	def test_numbered_lines_set_the_cursor(self):
		self.doc.lines(["a", "b"])
		self.assertEqual(3, self.doc.cursor)
		self.doc.jump_to_line(10)
		self.doc.line("c")
		self.assertEqual("1  | a\n2  | b\n... (7 lines not shown)\n10 | c", self.doc.render())

	def test_negative(self):
		self.doc.line("a")
		with self.assertRaises(InvalidLineNumberError):
			self.doc.jump_to_line(-1)
		with self.assertRaises(InvalidArgumentError):
			self.doc.jump_to_line(-5)
		self.assertEqual(2, self.doc.cursor)
		self.assertEqual(1, len(self.doc.blocks()))

	def test_any_non_negative_line_renders(self):
		for number in [0, 1, 9, 10, 99, 100, 12345]:
			doc = Document()
			doc.jump_to_line(number)
			doc.line("x").mark_warning(hint="?")
			self.assertIn("%d "%number, doc.render())

	def test_backwards_is_frowned_upon(self):
		self.doc.jump_to_line(10)
		self.doc.line("a")
		with self.assertWarns(UserWarning):
			self.doc.jump_to_line(3)
		self.doc.line("b")
		self.assertEqual("10 | a\n3  | b", self.doc.render())

	def test_gutter_grows_with_digits(self):
		self.doc.jump_to_line(98)
		self.doc.lines(["a", "b", "c"])
		self.assertEqual("98  | a\n99  | b\n100 | c", self.doc.render())

	def test_gutter_estimate_after_a_long_jump(self):
		self.doc.line("a")
		self.doc.jump_to_line(9990, report_skip=False)
		self.doc.line("b")
		self.assertEqual("1    | a\n9990 | b", self.doc.render())

	def test_digit_count(self):
		self.assertEqual([1, 1, 2, 3], list(map(digit_count, [0, 9, 10, 100])))


class BlockTests(unittest.TestCase):
	def setUp(self) -> None:
		self.doc = Document()
		self.doc.info("hello")
		self.doc.line("abc").add_color(slice(0, 1), '<', '>')

	def test_info_does_not_number(self):
		self.assertEqual(2, self.doc.cursor)
		self.assertEqual("hello\n1 | abc", self.doc.render())

	def test_configuration_applies_at_render_time(self):
		self.doc.set_indent_all_lines(True)
		self.doc.set_color(True)
		self.assertEqual("  | hello\n1 | <a>bc", self.doc.render())

	def test_render_twice(self):
		self.doc.line("def").mark_warning(slice(1, 3), hint="two")
		self.doc.set_color(True)
		self.assertEqual(self.doc.render(), self.doc.render())
		self.assertEqual(self.doc.render(), str(self.doc))

	def test_existing_lines(self):
		stamped = self.doc.line(AnnotatedLine("xyz", numbered=False, line_number=40))
		self.assertTrue(stamped.numbered)
		self.assertEqual(2, stamped.line_number)
		unstamped = self.doc.info(AnnotatedLine("note", numbered=True))
		self.assertFalse(unstamped.numbered)
		self.assertEqual("hello\n1 | abc\n2 | xyz\nnote", self.doc.render())

	def test_same_line_twice(self):
		first = self.doc.line(AnnotatedLine("xyz").mark_error(slice(0, 1)))
		second = self.doc.line(first)
		self.assertIsNot(first, second)
		self.assertEqual((2, 3), (first.line_number, second.line_number))
		self.assertEqual(first.underline_spans(), second.underline_spans())
		self.assertEqual("hello\n1 | abc\n2 | xyz\n    ^\n3 | xyz\n    ^", self.doc.render())

	def test_info_shows_no_underline(self):
		self.doc.info("plain").mark_error()
		self.assertEqual("hello\n1 | abc\nplain", self.doc.render())

	def test_wrong_type(self):
		with self.assertRaises(TypeError):
			self.doc.line(42)


if __name__ == '__main__':
	unittest.main()
