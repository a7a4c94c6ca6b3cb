from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Home Assistant Supervisor writes add-on options here
DEFAULT_ADDON_OPTIONS_PATH = "/data/options.json"
DEFAULT_DEVICES_FILE_PATH = "/data/devices.json"
