"""Domain initialization and configuration."""

from protean.domain import Domain

from supply.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="supply")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
supply = Domain(name="supply")
