import os
import sys

from dotenv import load_dotenv

from enums.runtime_environment import RuntimeEnvironment

# Load .env but don't override existing environment variables
# This allows test scripts to set RUNTIME_ENVIRONMENT=TEST before import
load_dotenv(".env", override=False)


def _exit_with_config_error(name: str, reason: str, expected: str) -> None:
    print(f"\n ERROR: Invalid {name} configuration\n", file=sys.stderr)
    print(f"Reason: {reason}", file=sys.stderr)
    print(f"Expected: {expected}", file=sys.stderr)
    print(f"Current value: {os.environ.get(name, '(not set)')}\n", file=sys.stderr)
    sys.exit(1)


def _non_negative_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
        if value < 0:
            raise ValueError(f"{name} must not be negative")
        return value
    except ValueError as e:
        _exit_with_config_error(name, str(e), "a non-negative number, e.g. 25 or 12.5")


# Parse RUNTIME_ENVIRONMENT with clear error message on misconfiguration
try:
    RUNTIME_ENVIRONMENT = RuntimeEnvironment(os.environ.get("RUNTIME_ENVIRONMENT", "PROD").strip().upper())
except ValueError as e:
    valid_values = [env.value for env in RuntimeEnvironment]
    _exit_with_config_error("RUNTIME_ENVIRONMENT", str(e), f"one of {', '.join(valid_values)}")

# Database
# ":memory:" keeps everything in-process (tests, throwaway demos)
DB_NAME = os.environ.get("DB_NAME", "catalog.db")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG" if RUNTIME_ENVIRONMENT == RuntimeEnvironment.DEV else "INFO")
try:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "7"))
except ValueError as e:
    _exit_with_config_error("LOG_RETENTION_DAYS", str(e), "whole number of days, e.g. 7")
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true").lower() == "true"

# Financial defaults (overridable at runtime through system_settings)
CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "£")
VAT_RATE = _non_negative_float("VAT_RATE", 20.0)  # percent
if VAT_RATE > 100:
    _exit_with_config_error("VAT_RATE", "VAT rate above 100 percent", "a percentage between 0 and 100")

# Delivery defaults (overridable at runtime through system_settings)
FREE_DELIVERY_THRESHOLD = _non_negative_float("FREE_DELIVERY_THRESHOLD", 1000.0)
DELIVERY_RATE_PER_M3 = _non_negative_float("DELIVERY_RATE_PER_M3", 50.0)
MINIMUM_DELIVERY_CHARGE = _non_negative_float("MINIMUM_DELIVERY_CHARGE", 25.0)
