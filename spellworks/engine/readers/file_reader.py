"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: FileReader
"""

from pathlib import Path


class BaseReader:
    """
    Very thin wrapper around ``IO``-alike object, to read it line by line and:

    * strip lines transparently
    * skip empty lines
    * ignore BOM (byte-order mark) at the beginning
    * yield line with its number (1-based)

    ::

        for line_no, line in BaseReader(io.StringIO("foo\\n\\nbar")):
            ...
        # => (1, 'foo'), (3, 'bar')
    """
    def __init__(self, obj):
        self.line_no = 0
        self.io = obj
        self.iter = filter(lambda l: l[1] != '', self.readlines())

    def __iter__(self):
        return self

    def __next__(self):
        return self.iter.__next__()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def close(self):
        pass

    def readlines(self):
        ln = self.io.readline()
        while ln != '':
            self.line_no += 1
            if self.line_no == 1 and ln.startswith('\ufeff'):
                ln = ln[1:]
            yield (self.line_no, ln.strip())
            ln = self.io.readline()


class FileReader(BaseReader):
    """
    Reader implementation for a filesystem file. Word lists are always UTF-8; the file is decoded
    strictly, so a malformed file raises ``UnicodeDecodeError`` while being iterated instead of
    producing garbage words.
    """

    def __init__(self, path, encoding='utf-8'):
        self.path = Path(path)
        super().__init__(open(self.path, 'r', encoding=encoding))

    def close(self):
        self.io.close()
