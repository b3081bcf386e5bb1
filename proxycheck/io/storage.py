import os
from pathlib import Path
from typing import Union

import requests

CHUNK_SIZE = 64 * 1024


def write_stream(path: Union[str, Path], response: requests.Response) -> int:
    """
    Stream a response body to `path`, replacing it only once the body is complete.
    Returns the number of bytes written.
    """
    dest = Path(path)
    tmp = dest.with_name(dest.name + ".part")
    written = 0
    try:
        with open(tmp, "wb") as out:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                if chunk:
                    out.write(chunk)
                    written += len(chunk)
        os.replace(tmp, dest)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return written
