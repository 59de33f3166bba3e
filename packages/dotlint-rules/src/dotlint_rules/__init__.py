from .checker import Reporter, Validator, default_rules

__all__ = ["Reporter", "Validator", "default_rules"]
