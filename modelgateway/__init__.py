"""Model gateway: a uniform four-stage pipeline for heterogeneous model providers"""

__version__ = "1.0.0"
