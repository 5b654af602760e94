"""Environment wrappers for Dobutsu."""

from .gym_env import DobutsuEnv

__all__ = ["DobutsuEnv"]
