"""exactreal - exact-where-possible numeric values for answer grading.

Main namespace package containing:
- exactreal.math: the Real value type, promotion and root engine
- exactreal.core: configuration, logging and errors
"""

__version__ = "0.1.0"

__all__ = []
