"""
This file aggregates the exception types and the few design constants which the report machinery deals in.

Every complaint this package makes about its callers is a ValueError at heart: somebody handed over
an argument which cannot be honored. The finer distinctions exist so that a caller who cares
(for example, one computing underline positions from a parse tree) can catch just the part that
concerns it.
"""

SKIP_NOTICE = "... (%d lines not shown)" # Informational block announcing a jump in line numbers.
GUTTER_SEPARATOR = '| ' # Sits between the line-number gutter and the text.

DEFAULT_FILL = '-'
ERROR_FILL = '^'
WARNING_FILL = '~'
WARNING_TIP = '^'

class ReportError(ValueError):
	""" Base class of all exceptions arising from the report machinery. """

class InvalidArgumentError(ReportError):
	""" An operation was handed an argument it cannot accept. The operation had no effect. """

class InvalidLineNumberError(InvalidArgumentError):
	""" Line numbers count up from zero. Nothing else makes sense in a gutter. """
	def __init__(self, line_number):
		super().__init__("Line number should not be negative: %r"%line_number)
		self.line_number = line_number

class OverlapError(InvalidArgumentError):
	"""
	Raised if a new underline would collide with one already present on the same line.
	Parameters are the start and stop of the rejected span.
	"""
	def __init__(self, start, stop):
		super().__init__("Overlapping underlines are not supported: [%d, %d)"%(start, stop))
		self.start, self.stop = start, stop
