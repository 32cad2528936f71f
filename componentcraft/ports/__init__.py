"""
Port interfaces for the componentcraft system.

This module contains the interface definitions using Python Protocols
to define contracts between the application layer and adapters.
"""

from .ui_port import UIPort
from .writer_port import WriterPort

__all__ = [
    "WriterPort",
    "UIPort",
]
