"""
Frame driving and rendering collaborators
"""

from .frame_driver import FrameDriver
from .renderers import Renderer, RecordingRenderer, JsonLinesRenderer, LoggingRenderer

__all__ = ['FrameDriver', 'Renderer', 'RecordingRenderer', 'JsonLinesRenderer', 'LoggingRenderer']
