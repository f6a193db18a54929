"""
Core request pipeline: temp files, resource resolution, signing and transport.
"""

from .tempfiles import allocate_temp_path, scoped_temp_file
from .resolver import ResourceResolver, ReferenceKind, IMAGE_EXTENSIONS, AUDIO_EXTENSIONS
from .params import RequestParameters
from .signer import sign, encode_params, signed_body
from .transport import Transport, TencentAIResult

__all__ = [
    "allocate_temp_path",
    "scoped_temp_file",
    "ResourceResolver",
    "ReferenceKind",
    "IMAGE_EXTENSIONS",
    "AUDIO_EXTENSIONS",
    "RequestParameters",
    "sign",
    "encode_params",
    "signed_body",
    "Transport",
    "TencentAIResult"
]
