"""Service implementations for the IPMA client."""

from ipmaclient.services.ipma_service import IPMAService
from ipmaclient.services.reference_data import ReferenceData

__all__ = ['IPMAService', 'ReferenceData']
