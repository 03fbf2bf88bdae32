"""File reader for JSON input documents."""

import logging
from pathlib import Path
from typing import Optional, Union
from ..types import ProcessingError, ErrorType


class FileReader:
    """Reads input documents as raw bytes."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        """
        Read a file's raw bytes.

        Raises:
            ProcessingError: If the file is missing or unreadable
        """
        input_path = Path(path)
        try:
            raw = input_path.read_bytes()
        except OSError as e:
            raise ProcessingError(
                str(e),
                ErrorType.FILESYSTEM,
                context={"path": str(input_path)}
            )

        self.logger.debug(f"Read {len(raw)} bytes from {input_path}")
        return raw
