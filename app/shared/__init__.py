"""
Shared module package.

Contains cross-cutting concerns:
- Error translation and disclosure
- Logging configuration
"""
