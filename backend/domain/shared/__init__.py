"""
Shared Kernel - building blocks used by every bounded context.
"""
