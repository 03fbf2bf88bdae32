"""Core type definitions for json2ts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class TypeToken(Enum):
    """Primitive type descriptors."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ANY = "any"


class KeyOrder(Enum):
    """Order in which object fields are listed."""
    DOCUMENT = "document"
    SORTED = "sorted"


class EmissionOrder(Enum):
    """Order in which interface declarations are listed."""
    DISCOVERY = "discovery"
    COMPLETION = "completion"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    FILESYSTEM = "filesystem"


@dataclass(frozen=True)
class SynthesizerOptions:
    """Options controlling naming, ordering and layout of the output."""
    root_name: str = "Root"
    interface_prefix: str = "Interface"
    key_order: KeyOrder = KeyOrder.DOCUMENT
    emission_order: EmissionOrder = EmissionOrder.DISCOVERY
    sort_union_members: bool = False
    indent: int = 2


@dataclass
class InterfaceDeclaration:
    """A named record type with an ordered list of (field, descriptor) pairs."""
    name: str
    fields: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Result of a conversion."""
    success: bool
    output: str
    declarations: List[str]
    errors: Optional[List[str]] = None
    error_type: Optional[ErrorType] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class ProcessingError(Exception):
    """Custom exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class TypeSynthesizerInterface(ABC):
    """Abstract interface for the type synthesizer."""

    @abstractmethod
    def synthesize(self, root: Dict[str, Any]) -> List[str]:
        """Synthesize rendered interface declarations for a root object."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
