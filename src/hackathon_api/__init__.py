"""hackathon_api."""

from .monitoring.logger import configure_logger

# Configure logger with default settings (console only)
# create_app() reconfigures it from Settings
configure_logger()
