"""
ANSI escape codes, for those who want their complaints in color.

Nothing else in this package looks inside these strings. Every coloring operation simply
accepts a prefix and a suffix and emits them verbatim, so any other terminal convention
will work just as well.
"""

RESET = '\033[0m'
BOLD = '\033[1m'
UNDERLINE = '\033[4m'

BLACK = '\033[30m'
RED = '\033[31m'
GREEN = '\033[32m'
YELLOW = '\033[33m'
BLUE = '\033[34m'
MAGENTA = '\033[35m'
CYAN = '\033[36m'
WHITE = '\033[37m'

LIGHT_RED = '\033[91m'
LIGHT_GREEN = '\033[92m'
LIGHT_YELLOW = '\033[93m'
LIGHT_BLUE = '\033[94m'
LIGHT_MAGENTA = '\033[95m'
LIGHT_CYAN = '\033[96m'

# The fixed styles behind mark_error and mark_warning.
ERROR = RED
WARNING = LIGHT_YELLOW
