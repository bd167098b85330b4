"""Global constants for codepointe"""

from enum import Enum

APP_NAME = "codepointe"
LOG_FORMAT = "%(message)s"

# Name of the logger every external process line is appended to
OUTPUT_LOGGER_NAME = "codepointe.output"
OUTPUT_SEPARATOR = "=" * 150

# Project identification
PROJECT_MARKER = ".sfdx"
PROJECT_CONFIG_FILE = ".codepointe.yaml"
HOOKS_FILE = ".codepointe.py"

# Directory structure
DEFAULT_SOURCE_DIR = "src"
DEFAULT_STATIC_RESOURCES_DIR = "src/staticresources"
DEFAULT_RESOURCE_BUNDLES_DIR = "resource-bundles"
DEFAULT_CONVERT_DIR = ".codepointe-convert"

# Hidden entries in the bundles directory start with this
HIDDEN_PREFIX = "."

# External commands
DEFAULT_CLI = "sfdx"
DEFAULT_ZIP_COMMAND = "zip"
ZIP_ARGS = ["-FSr"]
DEPLOY_COMMAND = "force:source:deploy"
CONVERT_COMMAND = "force:mdapi:convert"

# Debounce window in seconds
DEFAULT_DEBOUNCE_DELAY = 0.1

# Metadata suffixes deployable on their own
DEPLOYABLE_SUFFIXES = (
    ".page",
    ".component",
    ".cls",
    ".trigger",
    ".layout",
    ".resource",
    ".remoteSite",
    ".labels",
    ".app",
    ".dashboard",
    ".workflow",
    ".email",
    ".profile",
    ".scf",
    ".queue",
    ".reportType",
    ".report",
    ".weblink",
    ".tab",
    ".letter",
    ".role",
    ".homePageComponent",
    ".homePageLayout",
    ".objectTranslation",
    ".flow",
    ".datacategorygroup",
    ".snapshot",
    ".site",
    ".sharingRules",
    ".settings",
    ".callCenter",
    ".community",
    ".authProvider",
    ".customApplicationComponent",
    ".quickAction",
    ".approvalProcess",
    ".apxc",
    ".apxt",
)

# The CLI mishandles these types in a partial deploy, so they force a full compile
FULL_COMPILE_SUFFIXES = (
    ".object",
    ".permissionset",
)

# Directories never routed to a scheduler by the watcher
WATCH_IGNORE_DIRS = [
    PROJECT_MARKER,
    ".git",
    "node_modules",
    "__pycache__",
]


class OperationType(Enum):
    DEPLOY = "deploy"
    COMPILE = "compile"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "CP001"
    PROCESS_FAILED = "CP002"
    HOOK_FAILED = "CP003"
    PROJECT_NOT_FOUND = "CP004"
    DEPLOY_FAILED = "CP005"
    COMPILE_FAILED = "CP006"


# Environment variables
ENV_LOG_LEVEL = "CODEPOINTE_LOG_LEVEL"
ENV_CLI = "CODEPOINTE_CLI"
ENV_DEBOUNCE = "CODEPOINTE_DEBOUNCE"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_ROCKET = "🚀"

# Messages templates
MSG_DEPLOY_COMPLETE = "deploy complete"
MSG_DEPLOY_FAILED = "failed to deploy: {files}"
MSG_COMPILE_COMPLETE = "project compile complete"
MSG_COMPILE_FAILED = "project compile failed"
MSG_DEPLOYING = "deploying: {files}"
MSG_DEPLOYING_PROJECT = "deploying project"
