"""Lantern career recommendation engine.

Scores a high-school student's assessment answers against a career catalog
and returns recommendations enriched with AI guidance and local job data.
"""

__version__ = "1.0.0"
