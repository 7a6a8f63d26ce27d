"""
Community portal messaging core.

Chat sessions, support-ticket inbox, and WebSocket broadcast server
exposed as a FastAPI application.
"""

__version__ = "0.1.0"
