"""
Simple Config Constants

Defines string constants for the configuration builder to maintain consistency
and enable easy refactoring.

Version: 1.0.0
"""

# =============================================================================
# ENVIRONMENT ADAPTER NAMES
# =============================================================================

ADAPTER_ENV = "env"
ADAPTER_MODE = "mode"
ADAPTER_GLOBAL = "global"

# =============================================================================
# SETTINGS
# =============================================================================

SETTINGS_ENV_PREFIX = "SIMPLE_CONFIG_"
LOGGER_NAME = "simple_config"

# =============================================================================
# ERROR CODES
# =============================================================================

ERROR_INVALID_ENVIRONMENT = "INVALID_ENVIRONMENT"
ERROR_UNKNOWN_ENVIRONMENT_ADAPTER = "UNKNOWN_ENVIRONMENT_ADAPTER"
ERROR_NO_SUCH_MEMBER = "NO_SUCH_MEMBER"
ERROR_DUPLICATE_KEY = "DUPLICATE_KEY"
ERROR_INVALID_KEY = "INVALID_KEY"
ERROR_NAMESPACE_FROZEN = "NAMESPACE_FROZEN"
ERROR_BLOCK_NOT_RUNNING = "BLOCK_NOT_RUNNING"
ERROR_SERIALIZATION = "SERIALIZATION_ERROR"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

INVALID_ENVIRONMENT_MESSAGE = "{ENVIRONMENT} must implement matches(value) to be a valid environment"
UNKNOWN_ADAPTER_MESSAGE = "Unknown environment adapter: {ADAPTER_NAME}. Available adapters: {AVAILABLE_ADAPTERS}"
NO_SUCH_MEMBER_MESSAGE = "Namespace {NAMESPACE} has no member {KEY!r}"
NO_BOOL_FOR_NAMESPACE_MESSAGE = "{KEY!r} in namespace {NAMESPACE} is a namespace, not a setting"
DUPLICATE_KEY_MESSAGE = "Key {KEY!r} is already declared in namespace {NAMESPACE}"
INVALID_KEY_MESSAGE = "Setting and namespace keys must be non-empty strings, got {KEY!r}"
RESERVED_KEY_MESSAGE = "Key {KEY!r} is reserved by Namespace and cannot be declared"
VALUE_AND_BODY_MESSAGE = "Setting {KEY!r} takes either a value or a body, not both"
NAMESPACE_FROZEN_MESSAGE = "Namespace {NAMESPACE} is already built and cannot be modified"
BLOCK_NOT_RUNNING_MESSAGE = "environment() can only be called while a setting block is being evaluated"
BUILTIN_ADAPTER_UNREGISTER_MESSAGE = "Cannot unregister built-in environment adapter {ADAPTER_NAME!r}"

# =============================================================================
# MISC
# =============================================================================

ROOT_NAMESPACE_LABEL = "<root>"
COMMA = ","
SPACE = " "
