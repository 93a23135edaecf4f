"""
Harness configuration
"""

from restful_crud.config.settings import HarnessConfig, env_flag, get_config

__all__ = ["HarnessConfig", "env_flag", "get_config"]
