"""
Raw message formatting with selector and score resolution.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .formatter import RawTextFormatter, format_raw_message

__all__ = ["RawTextFormatter", "format_raw_message"]
