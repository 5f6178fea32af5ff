from enum import Enum

DEVICES_COLLECTION = "devices"
VERIFICATION_EVENTS_COLLECTION = "verification_events"

MAC_ID_MISSING_MESSAGE = "MAC ID missing"


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
