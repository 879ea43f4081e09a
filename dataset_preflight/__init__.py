"""Dataset Preflight package.

Lints a dataset directory before publication: scans and classifies files,
profiles tabular data (delimiter, header, column types and statistics),
checks structure, naming, metadata and FAIR rules, scores the result and
writes whatever documentation is missing.
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("dataset-preflight")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from dataset_preflight.domain.entities.column_type import ColumnType, InferredType
from dataset_preflight.domain.entities.tabular import (
    ColumnReport,
    Delimiter,
    TabularAnalysis,
)
from dataset_preflight.domain.services.type_inference import infer_batch
from dataset_preflight.infrastructure.io.tabular_analyzer import TabularAnalyzer

__all__ = [
    "__version__",
    "ColumnReport",
    "ColumnType",
    "Delimiter",
    "InferredType",
    "TabularAnalysis",
    "TabularAnalyzer",
    "infer_batch",
]
