"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Alphabet, bit-packing and numeric range constants
- exceptions: Custom exception hierarchy
- ingress: Request body normalisation for the HTTP boundary
"""
