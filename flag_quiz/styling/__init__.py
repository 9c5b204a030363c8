"""Styling module for the flag quiz."""

from .color_palette import ColorPalette, GradientStop

__all__ = ["ColorPalette", "GradientStop"]
