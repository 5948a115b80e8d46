"""
SQLCraft backend

Interactive SQL learning service: lesson content, a sandboxed query
playground, a JOIN visualizer and a schema design checker.
"""

__version__ = "0.1.0"
