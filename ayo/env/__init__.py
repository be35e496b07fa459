"""Gymnasium environment wrapper."""

from .gym_env import AyoEnv

__all__ = ["AyoEnv"]
