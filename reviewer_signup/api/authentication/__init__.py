"""
Authentication API package.

Contains the account signup route.
"""

from reviewer_signup.api.authentication.routes import router

__all__ = ["router"]
