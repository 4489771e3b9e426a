"""Reading whole files into strings."""

import os
from typing import Optional, Union

_ENCODING = "utf-8"


def file_to_str(path: Union[str, os.PathLike]) -> Optional[str]:
    """Return the whole contents of a file, or None when the file is empty.

    Line endings are kept as they are; a file that cannot be opened raises OSError.
    """
    with open(path, encoding=_ENCODING, newline="") as handle:
        content = handle.read()
    return content or None