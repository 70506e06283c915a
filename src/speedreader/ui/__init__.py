"""
Terminal presentation components

- renderer.py: FrameRenderer - ANSI frame construction and output
- presentation.py: PresentationLoop - countdown and word-by-word playback
"""

from speedreader.ui.renderer import FrameRenderer, build_frame
from speedreader.ui.presentation import PresentationLoop

__all__ = [
    'FrameRenderer',
    'build_frame',
    'PresentationLoop',
]
