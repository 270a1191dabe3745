"""Version 1 of the API, mounted under the configured API prefix."""
