"""dutui: scan a directory tree and browse its disk usage in the terminal."""

from .scanner import Node, ScanResult, TraversalError, scan, traverse

__all__ = ["Node", "ScanResult", "TraversalError", "scan", "traverse"]
__version__ = "0.1.0"
