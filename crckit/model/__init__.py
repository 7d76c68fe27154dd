from .algorithm import AlgorithmId, AlgorithmInfo, CRCParameters
from .catalog import ParameterTable, lookup
from .loader import CatalogLoader

__all__ = ["AlgorithmId",
           "AlgorithmInfo",
           "CRCParameters",
           "ParameterTable",
           "CatalogLoader",
           "lookup"]
