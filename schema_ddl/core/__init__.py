"""
Core schema components.

Provides the schema model, its validator, and generator configuration.
"""

from .schema import SchemaModel
from .validator import SchemaValidator, validate_schema
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config

__all__ = [
    # Schema model
    "SchemaModel",
    # Validation
    "SchemaValidator",
    "validate_schema",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
]
