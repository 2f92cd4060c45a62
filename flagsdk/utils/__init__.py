"""Utility functions for flagsdk."""

from .env import load_env_file

__all__ = ["load_env_file"]
