"""
Compiler-style error displays. Start with `complaint.pretty`, or `complaint.failureprone` if you have a whole text in hand.
"""
