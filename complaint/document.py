"""
A Document is a whole report: an ordered sequence of annotated lines, some with line numbers and some without.

The life cycle comes in two phases. First you build: configure, jump about, append lines, hang annotations
on them. Then you render, exactly once or as often as you like, but without further mutation in between.
Configuration (color, indentation) is consulted only at render time, so it makes no difference whether you
set it before or after adding content.

Numbered lines are laid out against a gutter shared by the whole report::

	Error at line 12:
	12 | time is window a but
	             ^~~~~~   ^~~
	             This...
	                      ...and this...

The gutter width comes from the first line number plus the final cursor. That's an estimate of the
largest number in play, not the true maximum, and a long forward jump can widen the gutter for a number
never shown. It has the virtue of being stable, so it stays.
"""

import warnings

from .annotated import AnnotatedLine
from .interfaces import InvalidLineNumberError, SKIP_NOTICE, GUTTER_SEPARATOR

def digit_count(number:int) -> int:
	return len(str(abs(number)))

def _coerce(content, blocks) -> AnnotatedLine:
	# A line already in the report gets copied, so each block keeps its own number.
	if isinstance(content, AnnotatedLine): return content.concat('') if any(b is content for b in blocks) else content
	if isinstance(content, str): return AnnotatedLine(content)
	raise TypeError("Expected a str or AnnotatedLine, got %r"%type(content))

class Document:
	"""
	Collects the blocks of a report and lays them out on request.

	The cursor is the number the next numbered line will get. It starts at 1 and is "unset" until the first
	jump or numbered line. Only after that does a forward jump leave a notice about skipped lines.
	"""
	def __init__(self, color:bool=False, indent_all_lines:bool=False):
		self.color = color
		self.indent_all_lines = indent_all_lines
		self._blocks = []
		self._cursor = 1
		self._cursor_set = False
		self._last_number = None

	@property
	def cursor(self) -> int: return self._cursor

	def blocks(self) -> tuple: return tuple(self._blocks)

	def set_color(self, flag:bool):
		""" Enable/Disable color code printing. """
		self.color = flag

	def set_indent_all_lines(self, flag:bool):
		"""
		If set, informational lines are indented to line up with the text of the numbered lines::

			    | Here is your error:
			8   | mistaek

		This is off by default, because usually you want the information to stand apart from the evidence.
		"""
		self.indent_all_lines = flag

	def jump_to_line(self, line:int, report_skip:bool=True):
		"""
		Move the cursor to `line`. If lines get skipped (and `report_skip` is set, and the cursor has been
		set before) then a short notice with the number of lines skipped goes in first.
		"""
		if line < 0: raise InvalidLineNumberError(line)
		if self._last_number is not None and line < self._last_number:
			warnings.warn("Line numbers should not go backwards: %d after %d"%(line, self._last_number))
		if report_skip and self._cursor_set and line > self._cursor + 1:
			self._blocks.append(AnnotatedLine(SKIP_NOTICE % (line - self._cursor)))
		self._cursor = line
		self._cursor_set = True

	def info(self, content) -> AnnotatedLine:
		""" Append informational text. It gets no line number and leaves the cursor alone. """
		line = _coerce(content, self._blocks)
		line.numbered = False
		self._blocks.append(line)
		return line

	def line(self, content) -> AnnotatedLine:
		"""
		Append one numbered line. This returns the AnnotatedLine, so you can chain annotations onto it.
		Appending a line that is already in the report appends (and returns) a copy instead::

			document.line("example").mark_error(slice(0, 3), hint="...")
		"""
		line = _coerce(content, self._blocks)
		line.numbered, line.line_number = True, self._cursor
		self._blocks.append(line)
		self._last_number = self._cursor
		self._cursor += 1
		self._cursor_set = True
		return line

	def lines(self, texts) -> list:
		""" Append several numbered lines in order. """
		return [self.line(text) for text in texts]

	def render(self) -> str:
		numbered = [block for block in self._blocks if block.numbered]
		starting_line = numbered[0].line_number if numbered else 1
		width = 1 + digit_count(starting_line + self._cursor)
		indent = ' ' * (width + len(GUTTER_SEPARATOR))
		rows = []
		for block in self._blocks:
			text = block.render_text(self.color)
			if not block.numbered:
				rows.append(' ' * width + GUTTER_SEPARATOR + text if self.indent_all_lines else text)
				continue
			number = str(block.line_number)
			rows.append(number + ' ' * (width - len(number)) + GUTTER_SEPARATOR + text)
			underline = block.render_underline(self.color)
			if underline: rows.append(indent + underline)
			rows.extend(indent + hint for hint in block.render_hints(self.color))
		return '\n'.join(rows)

	__str__ = render
