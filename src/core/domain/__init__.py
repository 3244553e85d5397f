"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) and the closed command set.
- The domain knows nothing about subprocesses, terminals or the CLI.
"""
