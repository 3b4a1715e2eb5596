"""Mesocycle periodization and adaptation engine.

Turns a user's training profile into a multi-week, muscle-aware resistance
training program and keeps re-tuning it from readiness checks, weekly session
feedback and long-run volume history.
"""

__version__ = "0.1.0"
