"""unreprex - recover clean, runnable code from rendered reprexes."""

__version__ = "0.1.0"
