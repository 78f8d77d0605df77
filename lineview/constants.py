"""Constants and configuration for the lineview viewer."""

class ViewerConstants:
    """Central configuration constants for the viewer."""

    # Screen layout
    STATUS_ROWS = 1  # Rows reserved below the text area for the status line
    STATUS_FORMAT = "{name} [{path}]  {column}:{line}/{lines}"

    # File loading
    FILE_ENCODING = "utf-8"

    # Command line diagnostics
    MISSING_ARGUMENT_MESSAGE = "Please specify a file you want to open."
    OPEN_FAILED_MESSAGE = "Could not open file: '{}'."
    EXIT_FAILURE = 1
