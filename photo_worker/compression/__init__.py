from photo_worker.compression.compressor import Compressor, compress
from photo_worker.compression.models import CompressionConfig, CompressionStatus, EncodedResult

__all__ = [
    "CompressionConfig",
    "CompressionStatus",
    "Compressor",
    "EncodedResult",
    "compress",
]
