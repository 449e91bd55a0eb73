"""Runtime logging for CLI-observable normalization activity."""

from .logger import RunLogger

__all__ = ["RunLogger"]
