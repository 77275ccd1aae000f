"""Voice command interpretation for hands-free editing.

Transcribed utterances are matched against a flat table of trigger
phrases. A phrase anywhere in the utterance (case-insensitive substring,
not whole-word) selects a formatting command; anything else is dictated
text. Substring matching tolerates disfluent transcripts at the price of
false positives: "please don't start list here" runs the bullet list
command.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .engine import apply_command
from .formatting import FormattingCommand
from .model import DocumentModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoiceTrigger:
    phrase: str
    command: FormattingCommand
    repeat: int = 1


# Evaluated in order; the first phrase contained in the utterance wins.
VOICE_TRIGGERS: tuple[VoiceTrigger, ...] = (
    VoiceTrigger("new paragraph", FormattingCommand.LINE_BREAK, repeat=2),
    VoiceTrigger("make header", FormattingCommand.HEADER1),
    VoiceTrigger("bold that", FormattingCommand.BOLD),
    VoiceTrigger("italic that", FormattingCommand.ITALIC),
    VoiceTrigger("add link", FormattingCommand.LINK),
    VoiceTrigger("insert image", FormattingCommand.IMAGE),
    VoiceTrigger("start list", FormattingCommand.BULLET_LIST),
    VoiceTrigger("numbered list", FormattingCommand.NUMBERED_LIST),
    VoiceTrigger("code block", FormattingCommand.CODE_BLOCK),
    VoiceTrigger("new line", FormattingCommand.LINE_BREAK),
    VoiceTrigger("blockquote", FormattingCommand.BLOCKQUOTE),
    VoiceTrigger("table", FormattingCommand.TABLE),
)


@dataclass(frozen=True)
class RunFormattingCommand:
    """Run ``command`` ``repeat`` times."""
    command: FormattingCommand
    repeat: int = 1


@dataclass(frozen=True)
class AppendLiteralText:
    """Append dictated text to the document."""
    text: str


Action = Union[RunFormattingCommand, AppendLiteralText]


def match_trigger(utterance: str) -> Optional[VoiceTrigger]:
    """Return the first trigger whose phrase occurs in ``utterance``."""
    lowered = utterance.lower()
    for trigger in VOICE_TRIGGERS:
        if trigger.phrase in lowered:
            return trigger
    return None


def classify(utterance: str) -> Action:
    trigger = match_trigger(utterance)
    if trigger is None:
        return AppendLiteralText(utterance)
    return RunFormattingCommand(trigger.command, trigger.repeat)


def apply_action(doc: DocumentModel, action: Action) -> DocumentModel:
    """Apply an interpreted action to ``doc`` in place and return it."""
    if isinstance(action, RunFormattingCommand):
        for _ in range(action.repeat):
            apply_command(doc, action.command)
    else:
        doc.append_text(action.text)
    return doc


class VoiceCommandInterpreter:
    """Classifies transcribed utterances and remembers what was heard."""

    def __init__(self):
        self.last_voice_command: Optional[str] = None
        self.partial_text: Optional[str] = None

    def interpret(self, utterance: str) -> Action:
        """Classify a finalized utterance.

        The raw utterance is recorded as ``last_voice_command`` whether or
        not it matched a trigger.
        """
        self.last_voice_command = utterance
        self.partial_text = None
        action = classify(utterance)
        logger.debug("Voice utterance %r -> %r", utterance, action)
        return action

    def preview(self, utterance: str) -> Action:
        """Classify a partial result for live display; never applied."""
        self.partial_text = utterance
        return classify(utterance)
