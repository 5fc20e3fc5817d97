"""Line-level classifiers for the Pluma lexer.

Each classifier is a mixin that decides whether a stripped line opens a
particular kind of Line and emits the matching event.
"""

from pluma.lexer.classifiers.heading import HeadingClassifierMixin
from pluma.lexer.classifiers.image import ImageClassifierMixin

__all__ = [
    "HeadingClassifierMixin",
    "ImageClassifierMixin",
]
