from .formatter import Formatter, FORMATS

__all__ = ['Formatter', 'FORMATS']
