"""
An annotated line is one immutable string of text, plus whatever decorations a complaint wants to hang on it.

There are two sorts of decoration:

* Color spans say "emit this prefix before such-and-such character, and this suffix after that other one."
  They may overlap or nest as you please. When one span closes while another is still open,
  the survivor's prefix is emitted again, because most terminal conventions close a color by resetting ALL
  attributes. The prefixes and suffixes are opaque: this module never looks inside them.

* Underline spans draw a row of glyphs beneath the text, optionally with a distinguished first glyph
  (the "arrow tip") and optionally with a hint: a bit of explanation shown on its own row, aligned
  under the start of the span. Underlines share a single row, so they must not overlap. Neighbors may
  share one boundary cell, and in that case the later span owns it.

Positions are code-point offsets into the text, given as a `slice` or `range` whose stop is
exclusive. (Any step is ignored.) Leaving out the range means the whole line.

All the mutators return `self`, so you can chain them::

	AnnotatedLine("time is window a but", numbered=True, line_number=12).mark_warning(slice(8, 14), hint="This...")
"""

from typing import NamedTuple, Optional, Iterable

from . import palette
from .interfaces import OverlapError, InvalidArgumentError, DEFAULT_FILL, ERROR_FILL, WARNING_FILL, WARNING_TIP

class ColorSpan(NamedTuple):
	start: int
	stop: int
	prefix: str
	suffix: str = palette.RESET

	def shifted(self, offset:int) -> "ColorSpan":
		return self._replace(start=self.start+offset, stop=self.stop+offset)

class UnderlineSpan(NamedTuple):
	""" If `arrow_tip` is None, the first cell is drawn with the `fill` glyph like all the rest. """
	start: int
	stop: int
	fill: str = DEFAULT_FILL
	arrow_tip: Optional[str] = None
	prefix: str = ''
	suffix: str = palette.RESET
	hint: str = ''

	def shifted(self, offset:int) -> "UnderlineSpan":
		return self._replace(start=self.start+offset, stop=self.stop+offset)

	def drawing(self, width:int) -> str:
		""" The glyphs for the first `width` cells of this span. """
		if width <= 0: return ''
		head = self.fill if self.arrow_tip is None else self.arrow_tip
		return head + self.fill * (width - 1)

def spans_collide(a:UnderlineSpan, b:UnderlineSpan) -> bool:
	"""
	The no-overlap rule for underlines on the same line: Whichever span starts second
	may begin no earlier than the last cell of the span which starts first.
	On a tie, the longer span counts as starting first, and two spans starting together always collide.
	"""
	first, second = sorted((a, b), key=lambda span: (span.start, -span.stop))
	return second.start < max(first.stop - 1, first.start + 1)

def _start_of(span): return span.start

def _once_each(codes:Iterable[str]):
	# Consecutive duplicates collapse: closing three spans at once needs but one reset.
	previous = None
	for code in codes:
		if code != previous: yield code
		previous = code

class AnnotatedLine:
	"""
	Text with color and underline annotations, plus the line-number metadata a Document uses.
	`numbered` and `line_number` belong to whoever places the line in a report; the text itself never changes.
	"""
	def __init__(self, text:str, numbered:bool=False, line_number:int=1):
		if not isinstance(text, str): raise TypeError("AnnotatedLine wants a str, not %r"%type(text))
		self._text = text
		self.numbered = numbered
		self.line_number = line_number
		self._colors = []
		self._underlines = []

	@property
	def text(self) -> str: return self._text

	def __repr__(self): return "<AnnotatedLine %r>"%self._text
	def __str__(self): return self.as_text(False)

	def color_spans(self) -> tuple: return tuple(self._colors)
	def underline_spans(self) -> tuple: return tuple(self._underlines)
	def is_underlined(self) -> bool: return bool(self._underlines)
	def has_hints(self) -> bool: return any(u.hint for u in self._underlines)

	def _bounds(self, where) -> tuple:
		""" Translate a slice, a range, or None (the whole line) into a (start, stop) pair. """
		if where is None: return 0, len(self._text)
		if not isinstance(where, (slice, range)):
			raise InvalidArgumentError("Expected a slice or range, got %r"%(where,))
		start = 0 if where.start is None else where.start
		stop = len(self._text) if where.stop is None else where.stop
		if start < 0 or stop < start:
			raise InvalidArgumentError("Bad span [%r, %r) for text of length %d"%(start, stop, len(self._text)))
		return start, stop

	def add_color(self, where, prefix:str, suffix:str=palette.RESET) -> "AnnotatedLine":
		""" Color the characters in `where`. Color spans may overlap freely. """
		start, stop = self._bounds(where)
		self._colors.append(ColorSpan(start, stop, prefix, suffix))
		return self

	def color_all(self, prefix:str, suffix:str=palette.RESET) -> "AnnotatedLine":
		return self.add_color(None, prefix, suffix)

	def add_underline(self, where=None, fill:str=DEFAULT_FILL, arrow_tip:Optional[str]=None,
	                  prefix:str='', suffix:str=palette.RESET, hint:str='') -> "AnnotatedLine":
		"""
		Draw `fill` beneath the characters in `where` (default: the whole line).
		If `arrow_tip` is given, it replaces the first glyph. The `hint` appears on a row of its own.
		Raises OverlapError, leaving the line as it was, if this would collide with an existing underline.
		"""
		start, stop = self._bounds(where)
		span = UnderlineSpan(start, stop, fill, arrow_tip, prefix, suffix, hint)
		if any(spans_collide(span, other) for other in self._underlines): raise OverlapError(start, stop)
		self._underlines.append(span)
		return self

	def mark_error(self, where=None, hint:str='') -> "AnnotatedLine":
		""" A sharp red line. """
		return self.add_underline(where, fill=ERROR_FILL, prefix=palette.ERROR, hint=hint)

	def mark_warning(self, where=None, hint:str='') -> "AnnotatedLine":
		""" A yellow squiggly line with an arrow tip at the start. """
		return self.add_underline(where, fill=WARNING_FILL, arrow_tip=WARNING_TIP, prefix=palette.WARNING, hint=hint)

	def render_text(self, colored:bool=True) -> str:
		"""
		The text with color codes injected at span boundaries. This is a two-pointer scan:
		one runs over the characters, the other over the color spans sorted by start.
		"""
		size = len(self._text)
		spans = [c for c in sorted(self._colors, key=_start_of) if c.start < c.stop and c.start < size]
		if not (colored and spans): return self._text
		out, active, pointer = [], [], 0
		for index, char in enumerate(self._text):
			closing = [c for c in active if c.stop == index]
			if closing:
				active = [c for c in active if c.stop != index]
				out.extend(_once_each(c.suffix for c in closing))
				out.extend(c.prefix for c in active)
			while pointer < len(spans) and spans[pointer].start == index:
				active.append(spans[pointer])
				out.append(spans[pointer].prefix)
				pointer += 1
			out.append(char)
		out.extend(_once_each(c.suffix for c in active))
		return ''.join(out)

	def render_underline(self, colored:bool=True) -> str:
		"""
		The single row of underline glyphs, aligned cell-for-cell beneath the text.
		Uncovered cells are blank. The row ends with the last span. With color, each span's prefix
		goes in the blank cell just before it, so the gap before a span (other than the first)
		reads `gap-1` spaces, prefix, space. The first span leans on an imaginary cell at column -1.
		"""
		spans = sorted(self._underlines, key=_start_of)
		if not spans: return ''
		stops = [min(u.stop, v.start) for u, v in zip(spans, spans[1:])] + [spans[-1].stop]
		row, column = [], 0
		for span, stop in zip(spans, stops):
			width = stop - span.start
			if width <= 0: continue
			gap = span.start - column
			if not colored: row.append(' ' * gap)
			elif row and gap: row.append(' ' * (gap - 1) + span.prefix + ' ')
			else: row.append(' ' * gap + span.prefix)
			row.append(span.drawing(width))
			if colored: row.append(span.suffix)
			column = stop
		return ''.join(row)

	def render_hints(self, colored:bool=True) -> list:
		""" One row per hint, in order of span start, each indented to its span's first column. """
		rows = []
		for span in sorted(self._underlines, key=_start_of):
			if not span.hint: continue
			body = span.prefix + span.hint + span.suffix if colored else span.hint
			rows.append(' ' * span.start + body)
		return rows

	def concat(self, other) -> "AnnotatedLine":
		"""
		A new line whose text is the two texts joined. Spans from `other` shift right by the length of
		this text. The line-number metadata comes from this (left-hand) line. Collisions between the
		two sets of underlines are NOT checked: that's your lookout.
		"""
		if isinstance(other, str): other = AnnotatedLine(other)
		offset = len(self._text)
		new = AnnotatedLine(self._text + other._text, self.numbered, self.line_number)
		new._colors = self._colors + [c.shifted(offset) for c in other._colors]
		new._underlines = self._underlines + [u.shifted(offset) for u in other._underlines]
		return new

	def __add__(self, other):
		if isinstance(other, (str, AnnotatedLine)): return self.concat(other)
		return NotImplemented

	def __radd__(self, other):
		if isinstance(other, str): return AnnotatedLine(other, numbered=True).concat(self)
		return NotImplemented

	def as_text(self, colored:bool=False) -> str:
		"""
		A multi-row picture of just this line: number (if any), the text, the underlines, and the hints.
		This is for showing a line on its own; a Document lays out its gutter differently.
		"""
		gutter = "%d | "%self.line_number if self.numbered else ''
		indent = ' ' * len(gutter)
		rows = [gutter + self.render_text(colored)]
		underline = self.render_underline(colored)
		if underline: rows.append(indent + underline)
		rows.extend(indent + hint for hint in self.render_hints(colored))
		return '\n'.join(rows)
