"""Category validators and the container dispatching objects to them."""

from .base import Validator
from .citation import CitationValidator
from .container import CATEGORIES, ValidatorContainer
from .crs import CRSValidator
from .cs import CSValidator
from .datum import DatumValidator
from .extent import ExtentValidator
from .geometry import GeometryValidator
from .metadata import MetadataBaseValidator, MetadataValidator
from .naming import NameValidator
from .operation import OperationValidator
from .parameter import ParameterValidator
from .quality import QualityValidator
from .referencing import ReferencingValidator

__all__ = [
    "CATEGORIES",
    "CRSValidator",
    "CSValidator",
    "CitationValidator",
    "DatumValidator",
    "ExtentValidator",
    "GeometryValidator",
    "MetadataBaseValidator",
    "MetadataValidator",
    "NameValidator",
    "OperationValidator",
    "ParameterValidator",
    "QualityValidator",
    "ReferencingValidator",
    "Validator",
    "ValidatorContainer",
]
