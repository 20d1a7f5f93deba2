from ediscovery.ai.analyzer import DocumentAnalyzer
from ediscovery.ai.client_base import BaseAIClient
from ediscovery.ai.factory import AIClientFactory

__all__ = ["AIClientFactory", "BaseAIClient", "DocumentAnalyzer"]
