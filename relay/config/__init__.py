"""
Configuration module for the Clover relay.

This module provides centralized configuration management for the entire application,
including constants, logging setup, and environment-based settings.

Key components:
- constants: Defines application-wide constants such as the logger name, Clover
  defaults, route paths and the plain-text response bodies.
- logging_config: Provides a consistent logging infrastructure with support for
  console and file-based logging with rotation capabilities.
- settings: Reads Clover credentials, endpoints and server options from the
  environment.

Usage examples:
```python
# Set up logging for your module
from relay.config.logging_config import configure_logging
logger = configure_logging()
logger.info("Application started")

# Read settings
from relay.config.settings import Settings
settings = Settings.from_env()
print(settings.missing_clover_settings())
```
"""

# Config module initialization
