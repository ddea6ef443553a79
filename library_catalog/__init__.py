"""Library Catalog - Core Package

This package contains the core catalog modules:
- Book records (book.py)
- File loading and parsing (loader.py)
- In-memory catalog (library.py)
- Catalog commands (commands.py)
- Grouping engine (grouping.py)
"""

__version__ = "1.0.0"
