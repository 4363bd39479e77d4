# src/charfreq/core/textfile.py
import os
import sys
from collections import Counter
from typing import Union

from charfreq.config import BYTE_ENCODING, LINE_TERMINATOR, OPEN_ERROR_TEMPLATE
from charfreq.core.report import print_report
from charfreq.models import CountResult

PathLike = Union[str, "os.PathLike[str]"]

class TextFile:
    """
    A named text file whose characters can be tallied.

    "Character" means one raw byte: the file is read in binary mode and
    each byte becomes a one-character key via latin-1, so multi-byte
    UTF-8 sequences are counted per byte.
    """

    def __init__(self, name: PathLike):
        self.name = os.fspath(name)

    def __repr__(self) -> str:
        return f"TextFile({self.name!r})"

    def _tally(self, f) -> Counter:
        table: Counter = Counter()
        for line in f:
            # Only the '\n' terminator is dropped; a preceding '\r' is data
            if line.endswith(LINE_TERMINATOR):
                line = line[:-1]
            table.update(line.decode(BYTE_ENCODING))
        return table

    def count(self, verbose: bool = False) -> CountResult:
        """
        Counts every character of the file, line by line.
        An unopenable file is reported on stderr and yields a failed
        result with an empty table. With verbose=True the frequency
        report is printed to stdout; the returned table is the same.
        """
        try:
            f = open(self.name, "rb")
        except OSError as e:
            message = OPEN_ERROR_TEMPLATE.format(path=self.name, reason=e.strerror or e)
            print(message, file=sys.stderr)
            return CountResult(path=self.name, error=message)

        with f:
            table = self._tally(f)

        if verbose:
            print_report(table)

        return CountResult(path=self.name, table=table)

def count_characters(path: PathLike, verbose: bool = False) -> CountResult:
    return TextFile(path).count(verbose=verbose)
