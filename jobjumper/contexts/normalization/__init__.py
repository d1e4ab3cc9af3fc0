"""
Normalization Context

Responsibilities:
- Strips fences, preamble and markdown noise from raw model text
- Locates and parses the JSON object embedded in model output
- Coerces arbitrary JSON values into display strings
- Sanitizes string leaves and reshapes resume-style fields

Owns: Turning raw model text into a clean generic JSON value
Never: Decides record shapes or failure policy
"""
