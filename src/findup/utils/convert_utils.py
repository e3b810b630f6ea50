"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import re
from typing import Tuple

_SIZE_SPEC_PATTERN = re.compile(r'^([+-]?)(\d+)([cbwkKMG]?)$')


class ConvertUtils:
    # find(1) style units
    SIZE_UNITS = {
        '': 1,
        'c': 1,
        'b': 512,
        'w': 2,
        'k': 1024,
        'K': 1024,
        'M': 1024 ** 2,
        'G': 1024 ** 3,
    }

    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 3.20MB).
        """
        if size_bytes < 0:
            return "0B"

        units = ["B", "KB", "MB", "GB", "TB", "PB"]
        for unit in units:
            if size_bytes < 1024:
                return f"{size_bytes:.2f}{unit}"
            size_bytes /= 1024
        return f"{size_bytes:.2f}EB"

    @staticmethod
    def parse_size_spec(size_spec: str) -> Tuple[str, int]:
        """
        Parse a find-style size spec into (operator symbol, threshold in bytes).

        '+N' means at least N, '-N' means at most N, plain 'N' means exactly N.
        Supported units: none or 'c' (bytes), 'b' (512-byte blocks), 'w' (2 bytes),
        'k' (KiB), 'M' (MiB), 'G' (GiB).
        Raises ValueError for malformed specs.
        """
        if size_spec is None:
            raise ValueError("Size spec cannot be empty")

        match = _SIZE_SPEC_PATTERN.match(size_spec.strip())
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_spec}'. "
                f"Supported formats: 100, +1k, -2M, 10c, 4b, 8w, +1G"
            )

        sign, number, unit = match.groups()
        operator_symbol = sign or '='
        return operator_symbol, int(number) * ConvertUtils.SIZE_UNITS[unit]

    @staticmethod
    def is_valid_size_spec(size_spec: str) -> bool:
        """
        Check if the input string is a valid size spec.
        """
        try:
            ConvertUtils.parse_size_spec(size_spec)
            return True
        except ValueError:
            return False
