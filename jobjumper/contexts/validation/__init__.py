"""
Validation Context

Responsibilities:
- Defines the typed records each dashboard feature renders
- Converts generic JSON values into fully-defaulted records
- Classifies presentation labels into soft enums

Owns: Record shapes and the field default table
Never: Parses raw text or raises on malformed input
"""
