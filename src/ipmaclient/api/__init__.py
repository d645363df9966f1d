"""API clients for the IPMA open-data service."""

from ipmaclient.api.base_api import BaseAPI
from ipmaclient.api.ipma_api import IPMAApiClient

__all__ = ['BaseAPI', 'IPMAApiClient']
