"""
Input Classifier

Normalises raw key presses from the physical and on-screen keyboards.
"""

import re

from ..models.game import BACKSPACE, ENTER, IGNORED, ClassifiedInput, RawKeyEvent

ENTER_KEYS = frozenset({'Enter', 'Return'})
BACKSPACE_KEYS = frozenset({'Backspace', 'Delete'})

_LETTER_PATTERN = re.compile(r'[A-Za-z]')


def classify_key(event: RawKeyEvent) -> ClassifiedInput:
    """
    Map a raw key press onto LETTER, ENTER, BACKSPACE or IGNORED.

    Any held alt, ctrl or meta modifier yields IGNORED so browser and OS
    shortcuts never reach the game.
    """
    if event.alt or event.ctrl or event.meta:
        return IGNORED

    if _LETTER_PATTERN.fullmatch(event.key):
        return ClassifiedInput.letter_key(event.key)

    if event.code in ENTER_KEYS or event.key in ENTER_KEYS:
        return ENTER

    if event.code in BACKSPACE_KEYS or event.key in BACKSPACE_KEYS:
        return BACKSPACE

    return IGNORED
