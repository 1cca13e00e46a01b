"""
This module is all about showing where things went wrong, in the context of the text they went wrong in.
A tool-developer should have easy access to a decent-looking error display without having to think about it.

Scanners and parsers generally know a problem's location only as an offset into the text. What's a decent
means to convert that to a line and column number? Or to slice the corresponding line from the larger text?
The SourceText handles that. Its `excerpt(...)` method lays out the offending line (with a bit of context,
if you like) in a Document, and `complain(...)` prints the result to STDERR.

An Issue is for the more elaborate case: a single problem with evidence scattered among several places,
possibly in several different texts. Each bit of evidence becomes an underlined line with a caption.

There is just one complication:

Line breaks are a funny thing. Unix calls for \\n. Apple prior to OSX called for \\r.
CP/M and its derivatives like Windows call for \\r\\n, really a printer control sequence.
The Unicode line-breaking algorithm calls for no less than ELEVEN ways to break a line!

Most applications treat the Unix, Apple, and DOS conventions as line-breaks and mostly ignore the other
options defined in the Unicode standard, so that's the default behavior of the SourceText. But you can
supply a mode argument to specify different line-ending conventions. The options are given symbolically
as keys in the LINEBREAK_MODE dictionary.
"""

import bisect, re, sys
from typing import NamedTuple, Any, Callable
from enum import Enum

from .annotated import AnnotatedLine
from .document import Document
from .interfaces import InvalidArgumentError, OverlapError

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unicode': re.compile(r'\r\n|[\x0a-\x0d\x1c-\x1e\u0085\u2028\u2029]'),
	'unix': re.compile(r'\n'),
	'apple': re.compile(r'\r'),
	'dos': re.compile(r'\r\n'),
}

class Severity(Enum):
	NOTICE = "Notice"
	WARNING = "Warning"
	ERROR = "Error"

	def mark(self, line:AnnotatedLine, where, hint:str='') -> AnnotatedLine:
		""" Underline `where` in the style suited to this severity. """
		if self is Severity.ERROR: return line.mark_error(where, hint)
		if self is Severity.WARNING: return line.mark_warning(where, hint)
		return line.add_underline(where, hint=hint)

class Evidence(NamedTuple):
	slice: slice
	caption: str = "here"

	def width(self): return self.slice.stop - self.slice.start

class SourceText:
	""" Wrapper for (a section of) source text: participates in half-respectable error-display with context. """
	def __init__(self, content:str, line_breaks='normal', filename:str=None, first_line=1):
		if line_breaks not in LINEBREAK_MODE: raise InvalidArgumentError("Unknown line-break mode %r"%line_breaks)
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.first_line = first_line
		self.__starts = self.__ends = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__starts is None:
			breaks = list(LINEBREAK_MODE[self.line_breaks].finditer(self.content))
			self.__starts = [0] + [m.end() for m in breaks]
			self.__ends = [m.start() for m in breaks] + [len(self.content)]

	def last_line(self) -> int:
		self.__make_bounds()
		return self.first_line + len(self.__starts) - 1

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Respects self.first_line. """
		if not 0 <= index <= len(self.content): raise InvalidArgumentError("Offset %r is outside the text."%index)
		self.__make_bounds()
		row = bisect.bisect_right(self.__starts, index) - 1
		return row + self.first_line, index - self.__starts[row]

	def offset_of(self, row:int, col:int) -> int:
		""" The reverse of find_row_col. The column may point just past the end of the line, but no further. """
		text = self.line_of_text(row)
		if not 0 <= col <= len(text): raise InvalidArgumentError("Line %d has no column %d."%(row, col + 1))
		return self.__starts[row - self.first_line] + col

	def line_of_text(self, row) -> str:
		""" Argument respects self.first_line. The line terminator is not included. """
		self.__make_bounds()
		r = row - self.first_line
		if not 0 <= r < len(self.__starts): raise InvalidArgumentError("There is no line %r."%row)
		return self.content[self.__starts[r]:self.__ends[r]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def excerpt(self, a_slice:slice, message:str, severity:Severity=Severity.ERROR, *, context:int=0, color:bool=False, caption:str='') -> Document:
		"""
		Lay out a complaint about the text in `a_slice` as a Document, which you may further adjust before
		rendering. The `context` is how many neighboring lines to show on either side.
		A slice spanning a line break is marked only as far as the end of its first line.
		"""
		row, col = self.find_row_col(a_slice.start)
		document = Document(color=color)
		document.info(self._format_message(row, col, message))
		document.jump_to_line(max(self.first_line, row - context))
		for r in range(max(self.first_line, row - context), min(self.last_line(), row + context) + 1):
			line = document.line(self.line_of_text(r))
			if r == row: severity.mark(line, _clip(line, col, a_slice.stop - a_slice.start), caption)
		return document

	def complaint(self, a_slice:slice, message:str, severity:Severity=Severity.ERROR, *, context:int=0, color:bool=False) -> str:
		return self.excerpt(a_slice, message, severity, context=context, color=color).render()

	def complain(self, a_slice:slice, message:str, severity:Severity=Severity.ERROR, *, context:int=0, color:bool=False):
		print(self.complaint(a_slice, message, severity, context=context, color=color), file=sys.stderr)

def _clip(line:AnnotatedLine, col:int, width:int) -> slice:
	return slice(col, col + max(1, min(width, len(line.text) - col)))

class Issue(NamedTuple):
	"""
	Contain all the information necessary to present elements of an error, warning, notice, or whatever.

	The notion is that any given issue could result from an interaction of causes
	in multiple different places. (For example, a mismatched function signature
	might have declaration and reference in different files.) Thus:

	phase: tells what portion of the interpretation process found the issue.
	severity: tells how bad the issue is, and so how the evidence gets underlined.
	description: explains the issue in plain language.
	evidence: a dictionary:
		from "key" (as known to an assumed "fetch" function),
		to lists of ``Evidence`` objects relevant to that corresponding text.
	"""
	phase: str
	severity: Severity
	description: str
	evidence: dict[Any, list[Evidence]]

	def as_text(self, fetch:Callable[[Any], SourceText], color:bool=False) -> str:
		"""
		This will generate a not-completely-terrible error report.
		Each text gets its own Document, with the evidence in order of position.
		Evidence that shares a line shares the underline row, unless the marks would overlap:
		then the line is shown again for the next piece.

		:param: "fetch" must be a function which takes a key (from the evidence dictionary)
		and returns a corresponding SourceText object.
		"""
		parts = ["%s while %s: %s"%(self.severity.value, self.phase, self.description)]
		for key, evidence in self.evidence.items():
			source = fetch(key)
			document = Document(color=color)
			if source.filename: document.info("Excerpt from "+source.filename+" :")
			line, row = None, None
			for e in sorted(evidence, key=lambda e: e.slice.start):
				r, col = source.find_row_col(e.slice.start)
				if r != row:
					document.jump_to_line(r)
					line, row = document.line(source.line_of_text(r)), r
				where = _clip(line, col, e.width())
				try: self.severity.mark(line, where, e.caption)
				except OverlapError:
					document.jump_to_line(r, report_skip=False)
					line = self.severity.mark(document.line(line.text), where, e.caption)
			if document.blocks(): parts.append(document.render())
		return "\n".join(parts)

	def emit(self, fetch:Callable[[Any], SourceText], color:bool=False):
		""" Print to standard error the generated error text. """
		print(self.as_text(fetch, color), file=sys.stderr)
