"""Completion, LaTeX log, template, run preparation and preview helpers for TikZ pictures."""

__version__ = "0.13.2"