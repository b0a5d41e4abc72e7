from .file_reader import BaseReader, FileReader
from .wordlist import read_wordlist, write_wordlist

__all__ = [
    "BaseReader",
    "FileReader",
    "read_wordlist",
    "write_wordlist"
]
