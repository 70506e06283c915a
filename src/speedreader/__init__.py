"""
Speed Reader

A terminal RSVP (Rapid Serial Visual Presentation) reader. Text piped on
standard input is shown one word at a time in the middle of the terminal.
"""

__version__ = "1.0.0"
