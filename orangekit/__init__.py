"""Engine utilities for voxel games: noise, vector math, timing, input, logging and debugging aids."""

__version__ = "0.1.0"