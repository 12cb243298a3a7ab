"""
Smart Number - Numeric Display and Input Engine

The numeric core of a personal-finance client: renders monetary amounts
under tight space constraints and keeps live text fields consistent with
validated numbers.

DESIGN PRINCIPLES:
1. Never throw on bad numbers - return an inspectable result
2. Full precision is always available next to the short form
3. Typing must not fight the user; normalization happens on blur
4. Every field owns its state; nothing is shared between fields
5. Locale and currency are parameters, never global state
"""

__version__ = "1.0.0"
__author__ = "Smart Number Team"
