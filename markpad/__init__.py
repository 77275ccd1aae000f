"""Markpad - a markdown editor with formatting commands and voice dictation."""

from .formatting import FormattingCommand, FormattingSpec, get_spec, header
from .model import DocumentModel
from .engine import apply_command, compute_insertion
from .voice import AppendLiteralText, RunFormattingCommand, VoiceCommandInterpreter
from .editor import EditSession

__all__ = [
    'FormattingCommand',
    'FormattingSpec',
    'get_spec',
    'header',
    'DocumentModel',
    'apply_command',
    'compute_insertion',
    'AppendLiteralText',
    'RunFormattingCommand',
    'VoiceCommandInterpreter',
    'EditSession',
]
