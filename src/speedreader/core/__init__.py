"""
Core reading session components

- rsvp.py: tokenizer, timing model and RSVPEngine
- cursor.py: Cursor, the word index shared with the interrupt handler
- input_reader.py: read_input, reads the piped text
- interrupt.py: InterruptHandler, prints the resume hint on Ctrl-C
"""

from speedreader.core.rsvp import RSVPEngine, tokenize, display_duration
from speedreader.core.cursor import Cursor
from speedreader.core.input_reader import read_input
from speedreader.core.interrupt import InterruptHandler

__all__ = [
    'RSVPEngine',
    'tokenize',
    'display_duration',
    'Cursor',
    'read_input',
    'InterruptHandler',
]
