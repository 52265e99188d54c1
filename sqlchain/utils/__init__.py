"""Utility modules shared across sqlchain."""

from sqlchain.utils import logging

__all__ = ("logging",)
