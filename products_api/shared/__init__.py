"""
Shared module package.

Contains cross-cutting concerns:
- Error translation chain
- Security middleware and rate limiting
- Logging configuration
"""
