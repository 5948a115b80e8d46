"""
SQLCraft service layer

Includes:
- ContentService: learning paths, lessons, scenarios, exercises
"""

from sqlcraft.services.content_service import ContentService, get_content_service

__all__ = [
    "ContentService",
    "get_content_service",
]
