"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
"""

# ============================================================================
# ROUTING DEFAULTS
# ============================================================================

# HTTP methods that get a registration entry point on routers and groups
HTTP_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS')

# Log duplicate route names at WARNING instead of DEBUG
DEFAULT_WARN_ON_DUPLICATE_NAMES = False

# Template segment markers
PARAMETER_MARKER = ':'
WILDCARD_MARKER = '*'

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_ENV = 'local'
DEFAULT_APP_URL = ''

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOGGER_NAME = 'namedrouter'
DEFAULT_LOG_FORMAT = 'text'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5

# ============================================================================
# CONSOLE DEFAULTS
# ============================================================================

DEFAULT_MAX_URI_WIDTH = 50
DEFAULT_MAX_NAME_WIDTH = 30
DEFAULT_MAX_PARAMETERS_WIDTH = 30
