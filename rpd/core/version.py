"""RPD - version constants.

Keep this module tiny and dependency-free. It is imported by the CLI and
the logging setup and must not have side effects.
"""

APP_NAME = "RusticPathData"
APP_SHORT = "RPD"

# App semantic version (must match pyproject.toml).
APP_VERSION = "0.1.0"

# Project settings file (repo-local), see rpd.core.settings.
PROJECT_SETTINGS_FILENAME = "rpd_settings.json"
