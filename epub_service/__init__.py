"""
EPUB generation status service.

Polling-based status orchestration for asynchronous EPUB generation jobs.
"""

__version__ = "0.1.0"
