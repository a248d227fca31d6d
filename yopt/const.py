VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "yopt"
DESCRIPTION = "A single-pass tokenizer for command lines and argument vectors"

# Upper bound on the number of characters scanned per parse call.
MAX_LENGTH = 4096

DEFAULT_GRAPH_FILE = "yopt-states.gv"

EXTRA_ARGS_ENV = "YOPT_EXTRA_ARGS"
LOG_FILE_ENV = "YOPT_LOG_FILE"
