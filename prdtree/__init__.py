"""
prdtree - Compile PRD documents into hierarchical task trees.

Main modules:
- parser: Section detection, entity extraction, tree building, statistics
- core: Configuration
- utils: Logging and ID helpers
- cli: Command-line interface
"""

from .parser import process, process_file, ProcessingReport

__version__ = "1.0.0"

__all__ = [
    'process',
    'process_file',
    'ProcessingReport',
    '__version__',
]
