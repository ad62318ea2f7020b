"""Parsers for extracting documented natives from declaration files."""

from jasssearch.parsers.base import BaseParser
from jasssearch.parsers.jass_parser import JassParser

__all__ = ["BaseParser", "JassParser"]
