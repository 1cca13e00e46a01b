"""
Point at a spot in a text file and complain about it, the way a compiler would:
show the line (with numbers, and context if you like) with the offending columns underlined.
"""

import sys, argparse

from complaint.failureprone import SourceText, Severity
from complaint.interfaces import ReportError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m complaint', description=__doc__,)
	parser.add_argument('source_path', help='path to input file')
	parser.add_argument('-l', '--line', type=int, required=True, help='line number to complain about, counting from 1')
	parser.add_argument('-c', '--column', type=int, default=1, help='first column to mark, counting from 1')
	parser.add_argument('-w', '--width', type=int, default=None, help='how many columns to mark; default is to the end of the line')
	parser.add_argument('-m', '--message', default='here', help='what to say about it')
	parser.add_argument('-s', '--severity', choices=[s.name.lower() for s in Severity], default='error', help='chooses the style of underline')
	parser.add_argument('-x', '--context', type=int, default=0, help='how many neighboring lines to show on either side')
	parser.add_argument('--color', action='store_true', help='emit ANSI color codes')
	parser.add_argument('--indent-all', action='store_true', dest='indent_all', help='line up the message with the numbered lines')
	parser.add_argument('-e', '--encoding', default='utf-8', help='character encoding of the input file')
	return parser.parse_args(argv)

def main(args):
	try:
		with open(args.source_path, encoding=args.encoding) as fh: source = SourceText(fh.read(), filename=args.source_path)
	except (OSError, UnicodeDecodeError) as e:
		print(e, file=sys.stderr)
		sys.exit(1)
	try:
		start = source.offset_of(args.line, args.column - 1)
		width = len(source.line_of_text(args.line)) - (args.column - 1) if args.width is None else args.width
		document = source.excerpt(slice(start, start + width), args.message, Severity[args.severity.upper()], context=args.context, color=args.color)
	except ReportError as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)
	document.set_indent_all_lines(args.indent_all)
	print(document.render())

if __name__ == '__main__': main(parse_arguments())
