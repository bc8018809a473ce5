"""Data Transfer Objects for application layer."""

from user_management.application.dtos.user_dto import CreateUserDTO, UpdateUserDTO, UserDTO

__all__ = ["CreateUserDTO", "UpdateUserDTO", "UserDTO"]
