"""
Console configuration: dataclass defaults, YAML overrides and validation.
"""
