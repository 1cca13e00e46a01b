"""
The most common use cases, packaged. Example::

	def report(doc):
		doc.jump_to_line(12)
		doc.info("Error at line 12:")
		doc.line("time is window a but").add_underline(slice(8, 14), hint="This...").add_underline(slice(17, 20), hint="...and this...")
		doc.info("...should be swapped?")

	pretty_print(report)

produces::

	Error at line 12:
	12 | time is window a but
	             ------   ---
	             This...
	                      ...and this...
	...should be swapped?
"""

import sys
from typing import Callable

from .annotated import AnnotatedLine
from .document import Document

def pretty_format(build:Callable[[Document], object], *, color:bool=False, indent_all_lines:bool=False) -> str:
	""" Build a Document by calling `build` on a fresh one, and return the rendered report. """
	document = Document(color=color, indent_all_lines=indent_all_lines)
	build(document)
	return document.render()

def pretty_print(build:Callable[[Document], object], *, color:bool=False, indent_all_lines:bool=False, file=None):
	""" Same as `pretty_format`, but print the report (to STDOUT unless you say otherwise). """
	print(pretty_format(build, color=color, indent_all_lines=indent_all_lines), file=file or sys.stdout)

def as_line(text:str) -> AnnotatedLine:
	"""
	Convert a string to a (numbered) AnnotatedLine, which can have effects applied to it::

		as_line("blubb").add_underline(slice(0, 5), prefix=palette.GREEN).color_all(palette.YELLOW).as_text(True)
	"""
	return AnnotatedLine(text, numbered=True)
