"""
Application layer package.

Contains use cases and DTOs. Orchestrates domain objects and ports.
No framework imports, no direct IO.
"""
