"""Presentation-side renderers. They consume read-only door views only."""

from .text import render_doors

__all__ = ["render_doors"]
