"""Project context decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import console
from ...api.exceptions import ConfigError, ProjectNotFoundError
from ...constants import EMOJI_ERROR
from ...core.path_resolver import PathResolver, find_project_root
from ...services.config_service import ConfigService


def require_project(func: Callable) -> Callable:
    """Decorator that ensures command runs in a valid project context

    This decorator:
    1. Finds the project root above --project-root (or the current directory)
    2. Loads the project configuration
    3. Adds root, config service and path resolver to the context object

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        start = ctx.obj.project_root_option or '.'

        project_root = find_project_root(start)

        if not project_root:
            console.print(f"{EMOJI_ERROR} {ProjectNotFoundError()}")
            ctx.exit(1)

        config_service = ConfigService(project_root)
        try:
            config = config_service.load_config()
        except ConfigError as e:
            console.print(f"{EMOJI_ERROR} Failed to load configuration: {e}")
            ctx.exit(1)

        ctx.obj.project_root = project_root
        ctx.obj.config_service = config_service
        ctx.obj.path_resolver = PathResolver(project_root, config)

        return func(*args, **kwargs)

    return wrapper
