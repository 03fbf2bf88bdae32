"""File writer for rendered declaration listings."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    Writes rendered interface listings to disk.

    Creates missing parent directories and writes UTF-8 text.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_declarations(self, output: str, output_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Write a rendered listing to a file.

        Args:
            output: Rendered declarations
            output_path: Destination file, typically ``*.ts``

        Returns:
            Dictionary with the absolute path and size in bytes

        Raises:
            ProcessingError: If writing fails
        """
        path = Path(output_path)
        try:
            self._ensure_directory_exists(path.parent)
            encoded = output.encode("utf-8")
            path.write_bytes(encoded)
        except OSError as e:
            raise ProcessingError(
                f"Failed to write declarations: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"output_path": str(path)}
            )

        self.logger.info(f"Wrote {len(encoded)} bytes to {path}")
        return {
            "path": str(path.absolute()),
            "size": len(encoded),
        }

    def _ensure_directory_exists(self, directory: Path) -> None:
        """Create the directory if it does not exist."""
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            self.logger.debug(f"Created directory: {directory}")
