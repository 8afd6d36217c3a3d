from intake.documents.base import BaseClassifier, BaseExtractor
from intake.documents.factory import DocumentServicesFactory
from intake.documents.models import DocumentCategory

__all__ = ["BaseClassifier", "BaseExtractor", "DocumentCategory", "DocumentServicesFactory"]
