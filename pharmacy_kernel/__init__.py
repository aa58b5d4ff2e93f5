"""
Pharmacy Kernel

The accounting core of the pharmacy point-of-sale system:
- Currency-safe, always-rounded monetary values
- Typed, code-bearing errors
- Structured JSON logging
- Injectable clock and reference-number generation
"""

__version__ = "0.1.0"
