"""Classic algorithm solutions for arrays, strings, k-sum, integers, linked lists, trees and dynamic programming."""

__version__ = "0.1.0"