from .fibonacci import fibonacci
from .normalizer import IndexNormalizer, normalize_index
from .result import RequestMeta, DebugInfo, ResultRecord, build_result
from .service import compute

__all__ = [
    "fibonacci",
    "IndexNormalizer", "normalize_index",
    "RequestMeta", "DebugInfo", "ResultRecord", "build_result",
    "compute",
]
