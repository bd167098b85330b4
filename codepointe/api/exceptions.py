"""Exception definitions for codepointe"""

from typing import List, Optional

from ..constants import ErrorCode


class CodePointeError(Exception):
    """Base exception for codepointe"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(CodePointeError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ProcessError(CodePointeError):
    """External process exited with a non-zero code

    The captured output is kept verbatim so the caller can decide whether
    to treat it as plain text or as a structured payload.
    """

    def __init__(self, command: List[str], exit_code: int, output: str):
        message = f"Command failed with exit code {exit_code}: {' '.join(command)}"
        super().__init__(message, ErrorCode.PROCESS_FAILED)
        self.command = command
        self.exit_code = exit_code
        self.output = output


class HookError(CodePointeError):
    """User hook failed to load or raised"""

    def __init__(self, hook_name: str, message: str):
        super().__init__(f"Hook {hook_name} failed: {message}", ErrorCode.HOOK_FAILED)
        self.hook_name = hook_name


class PathError(CodePointeError):
    """Path related error"""
    pass


class ProjectNotFoundError(PathError):
    """Project root not found error"""

    def __init__(self, path: Optional[str] = None):
        if path:
            message = f"No project root found above {path}"
        else:
            message = (
                "No project root found. Please ensure:\n"
                "1. You are in a project directory\n"
                "2. The project root contains a .sfdx directory\n"
                "3. Or pass the project location as an argument"
            )
        super().__init__(message, ErrorCode.PROJECT_NOT_FOUND)
