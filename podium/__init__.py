"""
Podium - speech delivery analytics.

Turns a word-level transcript (timestamps, text, optional confidence and
speaker labels) into delivery metrics: speaking pace, pause structure,
filler usage, fluency and clarity scores, pace timeline, and critical
moments.
"""

__version__ = "0.1.0"
