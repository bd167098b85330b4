"""Hook script template"""

import logging
from pathlib import Path
from typing import Optional, Union

from .hooks import HookPoint

logger = logging.getLogger(__name__)

HOOK_TEMPLATE_HEADER = '''"""CodePointe lifecycle hooks

Each function receives the current deploy batch:

- batch.root_path: project root directory
- batch.bundles: set of resource bundle names staged for zipping
- batch.files: set of project-relative files staged for deployment

Functions may be plain or async. Raising aborts the pipeline.
Delete the ones you do not need; this file is reloaded whenever it changes.
"""

'''

HOOK_TEMPLATE_FUNCTION = '''
def {name}(batch):
    pass
'''


def render_hook_template() -> str:
    """Render the hook script template with every hook point"""
    body = ''.join(HOOK_TEMPLATE_FUNCTION.format(name=point.alias) for point in HookPoint)
    return HOOK_TEMPLATE_HEADER + body.lstrip('\n')


def create_hook_template(script_path: Union[str, Path], force: bool = False) -> Optional[Path]:
    """
    Write a template hook script

    Args:
        script_path: Destination of the script
        force: Overwrite an existing script

    Returns:
        The written path, or None if a script already exists
    """
    script_path = Path(script_path)

    if script_path.exists() and not force:
        logger.warning(f"Hook script already exists: {script_path}")
        return None

    script_path.write_text(render_hook_template())
    logger.info(f"Created hook template: {script_path}")
    return script_path
