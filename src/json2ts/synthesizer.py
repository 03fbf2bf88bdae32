"""Type inference and interface synthesis for decoded JSON values."""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from .types import (
    TypeSynthesizerInterface,
    SynthesizerOptions,
    InterfaceDeclaration,
    TypeToken,
    KeyOrder,
    EmissionOrder,
)


IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass
class _SynthesisState:
    """Declarations and name counter owned by a single synthesize call."""
    declarations: List[InterfaceDeclaration] = field(default_factory=list)
    counter: int = 0

    def next_name(self, prefix: str) -> str:
        self.counter += 1
        return f"{prefix}{self.counter}"


class TypeSynthesizer(TypeSynthesizerInterface):
    """
    Infers interface declarations from a decoded JSON object.

    Every object value gets its own freshly named interface, including
    structurally identical repeats. Arrays become ``D[]`` when all elements
    share one descriptor and ``(D1 | D2)[]`` otherwise.

    The instance only holds options; the declaration list and the name
    counter live in a state object created for each ``synthesize`` call.
    """

    def __init__(self, options: Optional[SynthesizerOptions] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the synthesizer.

        Args:
            options: Naming, ordering and layout options
            logger: Optional logger instance
        """
        self.options = options or SynthesizerOptions()
        self.logger = logger or logging.getLogger(__name__)

    def synthesize(self, root: Dict[str, Any]) -> List[str]:
        """
        Synthesize rendered declarations for a root object.

        Args:
            root: Decoded JSON object

        Returns:
            Rendered ``export interface`` blocks, one per object in the input
        """
        return [self.render_declaration(declaration)
                for declaration in self.synthesize_declarations(root)]

    def synthesize_declarations(self, root: Dict[str, Any]) -> List[InterfaceDeclaration]:
        """
        Synthesize structured declarations for a root object.

        Args:
            root: Decoded JSON object

        Returns:
            Declarations in the configured emission order

        Raises:
            ValueError: If root is not a mapping
        """
        if not isinstance(root, Mapping):
            raise ValueError(f"Unsupported root data type: {type(root).__name__}")

        state = _SynthesisState()
        self._describe_object(self.options.root_name, root, state)

        self.logger.info(f"Synthesized {len(state.declarations)} interface declarations")
        return state.declarations

    def classify(self, value: Any) -> str:
        """
        Return the type descriptor of a single value.

        Objects nested in the value are named as in a standalone run; their
        declarations are not kept.
        """
        return self._classify(value, _SynthesisState())

    def _classify(self, value: Any, state: _SynthesisState) -> str:
        # bool is a subclass of int
        if isinstance(value, bool):
            return TypeToken.BOOLEAN.value
        elif isinstance(value, (int, float)):
            return TypeToken.NUMBER.value
        elif isinstance(value, str):
            return TypeToken.STRING.value
        elif value is None:
            return TypeToken.NULL.value
        elif isinstance(value, (list, tuple)):
            return self._describe_array(value, state)
        elif isinstance(value, Mapping):
            name = state.next_name(self.options.interface_prefix)
            return self._describe_object(name, value, state)
        return TypeToken.ANY.value

    def _describe_array(self, items: List[Any], state: _SynthesisState) -> str:
        if not items:
            return f"{TypeToken.ANY.value}[]"

        # dict keeps first-occurrence order
        members: Dict[str, None] = {}
        for item in items:
            members.setdefault(self._classify(item, state))

        if len(members) == 1:
            return f"{next(iter(members))}[]"

        ordered = list(members)
        if self.options.sort_union_members:
            ordered.sort()
        return f"({' | '.join(ordered)})[]"

    def _describe_object(self, name: str, obj: Mapping, state: _SynthesisState) -> str:
        declaration = InterfaceDeclaration(name=name)
        if self.options.emission_order == EmissionOrder.DISCOVERY:
            state.declarations.append(declaration)

        keys = list(obj.keys())
        if self.options.key_order == KeyOrder.SORTED:
            keys.sort()

        for key in keys:
            declaration.fields.append((str(key), self._classify(obj[key], state)))

        if self.options.emission_order == EmissionOrder.COMPLETION:
            state.declarations.append(declaration)

        self.logger.debug(f"Built interface {name} with {len(declaration.fields)} fields")
        return name

    def render_declaration(self, declaration: InterfaceDeclaration) -> str:
        """Render one declaration as an ``export interface`` block."""
        padding = " " * self.options.indent
        lines = [f"export interface {declaration.name} {{"]
        for field_name, descriptor in declaration.fields:
            lines.append(f"{padding}{format_field_name(field_name)}: {descriptor};")
        lines.append("}")
        return "\n".join(lines)


def format_field_name(name: str) -> str:
    """Quote field names that are not valid identifiers."""
    if IDENTIFIER_PATTERN.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def render(declarations: List[str]) -> str:
    """Join rendered declarations with blank lines and a trailing newline."""
    return "\n\n".join(declarations) + "\n"


def synthesize(root: Dict[str, Any], options: Optional[SynthesizerOptions] = None) -> List[str]:
    """Synthesize rendered declarations with a one-off synthesizer."""
    return TypeSynthesizer(options).synthesize(root)
