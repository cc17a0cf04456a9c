"""Barnes-Hut N-body simulation of a solar system, with vectors, octree, timer, thread pool and problem-file reader."""

__version__ = "0.1.0"