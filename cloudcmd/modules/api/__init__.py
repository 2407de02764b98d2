"""
API Module - Black Box Interface

Purpose: HTTP request/response models
Interface: ConvertResponse, ConversionErrorInfo
Hidden: Error serialization

The API only orchestrates - it contains no conversion logic.
"""

from .models import ConversionErrorInfo, ConvertResponse

__all__ = ["ConversionErrorInfo", "ConvertResponse"]
