"""Project configuration."""

from joydoc.config.project import ProjectConfig

__all__ = ["ProjectConfig"]
