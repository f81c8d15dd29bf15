"""Best-fit heap allocator over a fixed array of words, with stress workloads."""

__version__ = "0.1.0"
__all__ = ["heap", "stress"]