"""
Features Context

Responsibilities:
- Maps each dashboard feature to a record shape
- Runs the normalization pipeline with the feature's failure policy
- Substitutes placeholder records when configured to

Owns: Shape registry, failure policy resolution
Never: Calls the model or renders records
"""
