from .integration_client import HttpIntegrationClient

__all__ = ["HttpIntegrationClient"]
