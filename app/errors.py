class ConfigError(Exception):
    """Raised when the environment does not describe a runnable server."""
