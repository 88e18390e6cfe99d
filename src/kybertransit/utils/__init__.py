"""Utility functions for Kyber Transit."""

from .rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
