"""
Shared type aliases used across simplesm.

These carry no runtime behaviour; they exist for static analysis and
to keep signatures in the core modules readable.
"""
