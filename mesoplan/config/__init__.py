"""Application configuration module.

This module organizes configuration into specialized files:

- **settings.py**: Environment-based settings (Pydantic BaseSettings)
  - Debug/log level, catalog and engine config paths, program store path
  - Loaded from environment (``MESOPLAN_*``) or a .env file

- **engine_config.yaml** + **engine_config_loader.py**: Engine thresholds
  - Readiness levels and adjustment bundles
  - Deload window, streak threshold and advisory templates
  - Feedback rule table and generator constants
  - Reloadable via EngineConfigLoader

- **program_templates.py**: Static program-building tables
  - Split day templates, exercise pools per muscle
  - Goal x exercise-tier rep/rest table, equipment per setup
"""
from mesoplan.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
