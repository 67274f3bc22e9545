"""
Client module - Python gateway for the Internship Portal API.
"""
from internship_portal.client.gateway import Identity, IdentityStore, PortalClient

__all__ = ["Identity", "IdentityStore", "PortalClient"]
