"""Rendering subpackage.

Turns immutable ``World`` snapshots into text. See
:mod:`textgame.renderer.text` for the grid renderer used by ``show``.
"""

from .text import TextRenderer, render

__all__ = ["TextRenderer", "render"]
