"""Small programming exercises: ciphers, scales, tallies, trees and word games, one module each."""

__version__ = "0.1.0"