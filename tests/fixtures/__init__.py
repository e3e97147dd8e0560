"""Shared pytest fixtures for employee tests."""

from .core import *  # noqa: F401,F403
