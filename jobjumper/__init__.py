"""
JobJumper - response normalization for an AI job-search dashboard

Turns raw language-model output (fenced, chatty, loosely typed JSON or free
text) into fully-populated typed records the dashboard can render.

Architecture:
- Normalization Context: Fence stripping, JSON location, coercion, sanitizing
- Validation Context: Typed records, soft enums, strict validators
- Features Context: Shape registry, pipeline runner, per-feature handlers
"""

__version__ = "0.1.0"
