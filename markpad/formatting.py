"""Catalog of markdown formatting commands.

Each command is a member of a closed enumeration. The markup it inserts
lives in a static lookup table keyed by member, so menus, toolbars and the
voice interpreter all draw from the same vocabulary.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FormattingSpec:
    """Markup inserted by a formatting command."""
    prefix: str
    suffix: str
    is_line_start: bool
    display_name: str


class FormattingCommand(Enum):
    """Markdown editing operations, in menu order."""
    BOLD = "bold"
    ITALIC = "italic"
    INLINE_CODE = "inline_code"
    STRIKETHROUGH = "strikethrough"
    HEADER1 = "header1"
    HEADER2 = "header2"
    HEADER3 = "header3"
    HEADER4 = "header4"
    HEADER5 = "header5"
    HEADER6 = "header6"
    BULLET_LIST = "bullet_list"
    NUMBERED_LIST = "numbered_list"
    CHECKBOX_LIST = "checkbox_list"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "code_block"
    LINK = "link"
    IMAGE = "image"
    TABLE = "table"
    HORIZONTAL_RULE = "horizontal_rule"
    LINE_BREAK = "line_break"

    @property
    def spec(self) -> FormattingSpec:
        return FORMATTING_SPECS[self]

    @property
    def prefix(self) -> str:
        return FORMATTING_SPECS[self].prefix

    @property
    def suffix(self) -> str:
        return FORMATTING_SPECS[self].suffix

    @property
    def is_line_start(self) -> bool:
        return FORMATTING_SPECS[self].is_line_start

    @property
    def display_name(self) -> str:
        return FORMATTING_SPECS[self].display_name


def _header(level: int) -> FormattingSpec:
    return FormattingSpec("#" * level + " ", "", True, f"Header {level}")


FORMATTING_SPECS: dict[FormattingCommand, FormattingSpec] = {
    FormattingCommand.BOLD: FormattingSpec("**", "**", False, "Bold"),
    FormattingCommand.ITALIC: FormattingSpec("*", "*", False, "Italic"),
    FormattingCommand.INLINE_CODE: FormattingSpec("`", "`", False, "Inline Code"),
    FormattingCommand.STRIKETHROUGH: FormattingSpec("~~", "~~", False, "Strikethrough"),
    FormattingCommand.HEADER1: _header(1),
    FormattingCommand.HEADER2: _header(2),
    FormattingCommand.HEADER3: _header(3),
    FormattingCommand.HEADER4: _header(4),
    FormattingCommand.HEADER5: _header(5),
    FormattingCommand.HEADER6: _header(6),
    FormattingCommand.BULLET_LIST: FormattingSpec("- ", "", True, "Bullet List"),
    FormattingCommand.NUMBERED_LIST: FormattingSpec("1. ", "", True, "Numbered List"),
    FormattingCommand.CHECKBOX_LIST: FormattingSpec("- [ ] ", "", True, "Checkbox List"),
    FormattingCommand.BLOCKQUOTE: FormattingSpec("> ", "", True, "Blockquote"),
    FormattingCommand.CODE_BLOCK: FormattingSpec("```\n", "\n```", False, "Code Block"),
    FormattingCommand.LINK: FormattingSpec("[", "](url)", False, "Link"),
    FormattingCommand.IMAGE: FormattingSpec("![", "](image.jpg)", False, "Image"),
    FormattingCommand.TABLE: FormattingSpec(
        "| Column 1 | Column 2 |\n|----------|----------|\n| ",
        " |\n| Cell 1   | Cell 2   |",
        False,
        "Table",
    ),
    FormattingCommand.HORIZONTAL_RULE: FormattingSpec("---\n", "", True, "Horizontal Rule"),
    FormattingCommand.LINE_BREAK: FormattingSpec("\n", "", False, "Line Break"),
}

_HEADERS = (
    FormattingCommand.HEADER1,
    FormattingCommand.HEADER2,
    FormattingCommand.HEADER3,
    FormattingCommand.HEADER4,
    FormattingCommand.HEADER5,
    FormattingCommand.HEADER6,
)


def get_spec(command: FormattingCommand) -> FormattingSpec:
    """Return the markup for a command."""
    return FORMATTING_SPECS[command]


def header(level: int) -> FormattingCommand:
    """Return the header command for a level between 1 and 6.

    Raises:
        ValueError: If level is outside 1..6.
    """
    if not 1 <= level <= 6:
        raise ValueError(f"Header level must be between 1 and 6, got {level}")
    return _HEADERS[level - 1]
