"""Constants and configuration for the markpad editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Documents
    UNTITLED_NAME = "Untitled"
    MODIFIED_MARKER = " *"
    DEFAULT_EXPORT_EXTENSION = ".pdf"
    WELCOME_TEXT = (
        "# Welcome to Markpad\n"
        "\n"
        "Start typing on the left to see a live preview.\n"
        "\n"
        "- Use the toolbar or shortcuts to insert **bold**, *italic* and `code`\n"
        "- Dictate text, or say \"make header\", \"start list\" or \"new line\"\n"
        "- Export to PDF when you are done\n"
    )

    # Dictation
    DICTATION_SEPARATOR = " "

    # History
    UNDO_LIMIT = 500  # Maximum undo entries kept per session

    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Settings
    RECENT_FILES_LIMIT = 10
    MIN_PDF_FONT_SIZE = 6
    MAX_PDF_FONT_SIZE = 24

    # PDF layout (points, US letter)
    PDF_MARGIN = 72
    PDF_FONT_SIZE = 11

    # Status messages
    SAVED_MESSAGE = "Saved to {}"
    EXPORTED_MESSAGE = "Exported PDF to {}"
