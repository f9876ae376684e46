"""Building blocks for an artificial-life simulation engine: vectors, vector math,
trackers, settings encoding, logging, a service locator, random numbers, buffer
pooling, and a threaded simulation worker with its controller."""

__version__ = "0.1.0"