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


# Upstream call bounds, in seconds.
ACQUIRE_TIMEOUT_SECONDS = 20.0
PREDICT_TIMEOUT_SECONDS = 15.0
HEALTH_CHECK_TIMEOUT_SECONDS = 3.0

EXPECTED_FEATURE_COUNT = 7

PREDICTION_SOURCE = "orchestrator"
