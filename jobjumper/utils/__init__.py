"""
Shared utilities for JobJumper.

Common functionality used across contexts:
- Balanced-brace text scanning
- Logger setup
- Configuration management
"""
