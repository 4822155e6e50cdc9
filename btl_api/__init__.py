"""btl.run API — serverless HTTP entry point for the btl.run backend."""

__version__ = "0.1.0"
