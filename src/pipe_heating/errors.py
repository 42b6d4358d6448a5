class ConfigurationError(ValueError):
    """Input combination the calculator cannot evaluate (zero duration, empty volume, unknown key)."""
