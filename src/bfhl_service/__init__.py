"""
BFHL classification service.

Accepts an array of short strings and returns a categorized breakdown:
- Numeric tokens split into odd and even
- Alphabetic tokens upper-cased
- Everything else as special characters
- The numeric sum and a reversed, alternating-caps concatenation of the alphabets

Architecture: FastAPI adapter around a pure classification function
"""

__version__ = "1.0.0"
