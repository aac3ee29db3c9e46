"""
utils/ - Shared Helpers
=======================
Logging setup, timing and console output used by every other layer.
"""
