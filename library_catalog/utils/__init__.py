"""Library Catalog - Utilities Package

This package contains helper modules shared by the CLI and the commands:
- Argument and text validators
- Output rendering for plain/json/rich modes
- CLI configuration store (preferences and aliases)
"""
