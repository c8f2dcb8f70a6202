"""Utility functions for configuration and stream consumers."""

from nbody_sim.utils.config import load_config, save_config, build_system, Config
from nbody_sim.utils.circular_buffer import CircularBuffer

__all__ = ["load_config", "save_config", "build_system", "Config", "CircularBuffer"]
