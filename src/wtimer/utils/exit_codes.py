"""
Exit codes for wtimer.

Scripts wrapping the timer can tell a declined "continue?" prompt apart from
a history file that could not be written.
"""

# Success (loop finished or user declined to continue)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# History or configuration file could not be written
ERROR_PERSISTENCE = 3

# Stopped with Ctrl-C (128 + SIGINT)
INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_PERSISTENCE: "ERROR_PERSISTENCE",
        INTERRUPTED: "INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_PERSISTENCE: "Could not write history or configuration file",
        INTERRUPTED: "Interrupted by the user",
    }
    return descriptions.get(code, "Unknown error")
