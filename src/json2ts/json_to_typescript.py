"""Conversion facade: JSON documents in, interface listings out."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from .types import (
    ConversionResult,
    SynthesizerOptions,
    ProcessingError,
    ErrorType
)
from .parser import JSONParser
from .synthesizer import TypeSynthesizer, render
from .error_handler import ErrorHandler
from .io import FileReader, FileWriter
from .profiler import PerformanceProfiler


class JSONToTypeScript:
    """
    Converts JSON documents into TypeScript interface declarations.

    Wires the file reader, parser and synthesizer together. Read and decode
    failures are reported in the returned ConversionResult and stop the run
    before any synthesis happens.
    """

    def __init__(self, options: Optional[SynthesizerOptions] = None,
                 logger: Optional[logging.Logger] = None,
                 enable_profiling: bool = False,
                 max_depth_warning: int = 20):
        """
        Initialize the converter.

        Args:
            options: Synthesizer options (names, field order, union order, indent)
            logger: Optional logger instance
            enable_profiling: Collect timing and memory metrics for each conversion
            max_depth_warning: Nesting depth above which input validation warns
        """
        self.options = options or SynthesizerOptions()
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger, max_depth_warning)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.synthesizer = TypeSynthesizer(self.options, self.logger)
        self.file_reader = FileReader(self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if enable_profiling else None

    def convert(self, json_string: str) -> ConversionResult:
        """
        Convert a JSON string.

        Args:
            json_string: Document whose root must be an object

        Returns:
            ConversionResult with the rendered listing
        """
        return self._run(lambda: self.parser.parse(json_string),
                         len(json_string.encode("utf-8")))

    def convert_bytes(self, raw: bytes) -> ConversionResult:
        """Convert UTF-8 encoded JSON bytes."""
        return self._run(lambda: self.parser.parse_bytes(raw), len(raw))

    def convert_file(self, path: Union[str, Path]) -> ConversionResult:
        """
        Convert the JSON document stored at ``path``.

        Args:
            path: Input file path

        Returns:
            ConversionResult; a missing or unreadable file yields a failed result
        """
        self.logger.info(f"Converting {path}")
        try:
            raw = self.file_reader.read_bytes(path)
        except ProcessingError as e:
            return self._failure(e)
        return self.convert_bytes(raw)

    def convert_data(self, data: Dict[str, Any]) -> ConversionResult:
        """Convert an already decoded root object."""
        def check() -> Dict[str, Any]:
            if not isinstance(data, dict):
                raise ProcessingError(
                    f"Root element must be an object, got {type(data).__name__}",
                    ErrorType.STRUCTURE
                )
            return data
        return self._run(check, 0)

    def write(self, result: ConversionResult, output_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Write a successful result's listing to ``output_path``.

        Raises:
            ProcessingError: If the result failed or writing fails
        """
        if not result.success:
            raise ProcessingError(
                "Cannot write a failed conversion",
                ErrorType.STRUCTURE,
                context={"errors": result.errors}
            )
        return self.file_writer.write_declarations(result.output, output_path)

    @staticmethod
    def render(declarations: List[str]) -> str:
        """Join declarations into the final listing."""
        return render(declarations)

    def _run(self, decode: Callable[[], Dict[str, Any]], input_size: int) -> ConversionResult:
        try:
            data = decode()
        except ProcessingError as e:
            return self._failure(e)

        try:
            if self.logger.isEnabledFor(logging.DEBUG):
                stats = self.parser.get_structure_statistics(data)
                self.logger.debug(f"Document statistics: {stats}")

            declarations, output = self._synthesize(data, input_size)
        except RecursionError as e:
            return self._failure(ProcessingError(
                f"Input nesting too deep: {str(e)}",
                ErrorType.STRUCTURE
            ))
        return ConversionResult(
            success=True,
            output=output,
            declarations=declarations
        )

    def _synthesize(self, data: Dict[str, Any], input_size: int) -> Tuple[List[str], str]:
        if self.profiler is None:
            declarations = self.synthesizer.synthesize(data)
            return declarations, render(declarations)

        with self.profiler.profile_operation("json_to_typescript", input_size) as profiler:
            declarations = self.synthesizer.synthesize(data)
            profiler.sample_performance()
            output = render(declarations)
            profiler.record_result(len(output.encode("utf-8")), len(declarations))
        return declarations, output

    def _failure(self, error: ProcessingError) -> ConversionResult:
        response = self.error_handler.handle_processing_error(error)
        self.logger.info(f"Suggested action: {response.suggested_action}")

        if error.error_type == ErrorType.FILESYSTEM:
            message = f"Error reading file: {error}"
        else:
            message = f"Error parsing JSON: {error}"

        return ConversionResult(
            success=False,
            output="",
            declarations=[],
            errors=[message],
            error_type=error.error_type
        )
