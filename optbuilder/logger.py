# Optbuilder CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for optbuilder."""
import logging

logger: logging.Logger = logging.getLogger("optbuilder")
