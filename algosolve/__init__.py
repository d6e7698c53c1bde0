"""Solutions to classic algorithm exercises on numbers, text, arrays, linked lists, trees and graphs."""

__version__ = "0.1.0"