"""Infrastructure Layer — logging setup and console output.

Invariants:
    - Infrastructure never decides HTTP responses
"""
