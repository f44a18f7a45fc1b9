"""Exit status constants shared by the dispatcher and the built-in commands."""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_FAILURE = 1
EXIT_CODE_USAGE = 2

# Conventional shell statuses for commands that could not be started
EXIT_CODE_NOT_FOUND = 127
EXIT_CODE_INTERRUPTED = 130
