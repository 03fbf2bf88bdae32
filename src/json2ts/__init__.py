"""
json2ts - infer TypeScript interfaces from JSON documents.

Every object in the input becomes a named ``export interface``; arrays
become element or union array types.
"""

__version__ = "1.0.0"

from .json_to_typescript import JSONToTypeScript
from .synthesizer import TypeSynthesizer, synthesize, render
from .types import (
    ConversionResult,
    InterfaceDeclaration,
    SynthesizerOptions,
    KeyOrder,
    EmissionOrder,
    ProcessingError,
    ErrorType,
)

__all__ = [
    "JSONToTypeScript",
    "TypeSynthesizer",
    "synthesize",
    "render",
    "ConversionResult",
    "InterfaceDeclaration",
    "SynthesizerOptions",
    "KeyOrder",
    "EmissionOrder",
    "ProcessingError",
    "ErrorType",
]
