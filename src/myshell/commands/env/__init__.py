"""Env command."""

from .env import EnvCommand

__all__ = ["EnvCommand"]
