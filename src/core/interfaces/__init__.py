"""Core interfaces and abstractions.

Why:
- Defines the contracts (Protocol) implemented by adapters and handlers.
- Inverts dependencies: the core depends on abstractions, not on subprocess.
"""
