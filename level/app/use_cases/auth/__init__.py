"""
Authentication Use Cases
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .get_viewer_use_case import GetViewerUseCase
from .dtos import LoginResponse, SignupCommand, SignupResponse, TeamInfo, UserInfo

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "GetViewerUseCase",
    # DTOs
    "SignupCommand",
    "SignupResponse",
    "LoginResponse",
    "UserInfo",
    "TeamInfo",
]
