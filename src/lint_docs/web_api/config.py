"""
Configuration settings for the web host.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Web host configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Page
    PAGE_SOURCE: str = "./public/ignoring-rules.md"
    PAGE_TITLE: str = "Ignoring rules"
    HIGHLIGHTER: str = "pygments"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type in (bool, "bool"):
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type in (int, "int"):
                    setattr(self, key, int(env_value))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
