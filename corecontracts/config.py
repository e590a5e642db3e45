import os

# Logging configuration
LOG_LEVEL = os.environ.get("CORECONTRACTS_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
