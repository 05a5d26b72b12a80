"""Version information for pathologize."""

# Should match pyproject.toml
APP_VERSION: str = "0.1.0"
