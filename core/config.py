#!/usr/bin/env python3
"""
Centralized Configuration for the Glossary Walk
Site constants, request settings, and logging setup
"""

import logging
import os
from typing import Dict, Optional

from core.errors import ArgumentError


class GlossaryConfig:
    """Centralized configuration for glossary lookups"""

    # Glossary site
    BASE_URL = "https://www.alleydog.com"
    SEARCH_PATH = "/search-results.php?q={term}"

    # Search results page structure
    RESULTS_CONTAINER_CLASS = "results"
    STOP_MARKER = "are we missing"
    GLOSSARY_MARKER = "Glossary"
    MAX_DEFINITIONS = 4

    # Requests block until the server answers unless a timeout is configured
    REQUEST_TIMEOUT: Optional[float] = None

    # Logging Configuration
    LOGGING = {
        'level': 'WARNING',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    @property
    def search_url_template(self) -> str:
        """Search endpoint with a ``{term}`` placeholder"""
        return self.BASE_URL.rstrip('/') + self.SEARCH_PATH

    def search_url(self, term: str) -> str:
        """Substitute ``term`` verbatim into the search endpoint"""
        return self.search_url_template.replace('{term}', term)

    @classmethod
    def from_env(cls) -> 'GlossaryConfig':
        """Create configuration from environment variables"""
        config = cls()

        if os.getenv('GLOSSARY_BASE_URL'):
            config.BASE_URL = os.getenv('GLOSSARY_BASE_URL')
        if os.getenv('GLOSSARY_RESULTS_CLASS'):
            config.RESULTS_CONTAINER_CLASS = os.getenv('GLOSSARY_RESULTS_CLASS')
        if os.getenv('GLOSSARY_REQUEST_TIMEOUT'):
            config.REQUEST_TIMEOUT = parse_timeout(os.getenv('GLOSSARY_REQUEST_TIMEOUT'), 'GLOSSARY_REQUEST_TIMEOUT')
        if os.getenv('GLOSSARY_LOG_LEVEL'):
            config.LOGGING = dict(cls.LOGGING, level=os.getenv('GLOSSARY_LOG_LEVEL').upper())

        return config

    def get_logging_config(self) -> Dict:
        """Get logging configuration"""
        return dict(self.LOGGING)


def setup_logging(config: GlossaryConfig = None, verbose: bool = False) -> None:
    """Configure root logging on stderr so it never mixes with the definitions on stdout"""
    logging_config = (config or GlossaryConfig()).get_logging_config()
    level = logging.DEBUG if verbose else getattr(logging, logging_config['level'], logging.WARNING)
    logging.basicConfig(level=level, format=logging_config['format'])


def get_config() -> GlossaryConfig:
    """Get configuration honouring environment overrides"""
    return GlossaryConfig.from_env()


def parse_timeout(raw, source: str = 'timeout') -> float:
    """Parse a request timeout in seconds; it must be a positive number"""
    try:
        timeout = float(raw)
    except (TypeError, ValueError):
        raise ArgumentError(f"{source} must be a number of seconds, got '{raw}'")
    if not timeout > 0:
        raise ArgumentError(f"{source} must be greater than 0, got {raw}")
    return timeout
