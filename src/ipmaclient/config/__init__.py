"""Configuration for the IPMA client."""

from ipmaclient.config.logging import setup_logging
from ipmaclient.config.settings import ClientSettings
from ipmaclient.config.settings import load_settings

__all__ = ['ClientSettings', 'load_settings', 'setup_logging']
