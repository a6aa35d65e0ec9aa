import sys
import threading
from queue import Queue, Empty

from errors import ERRORS, IoError

STDIN_TIMEOUT = 0.01 # seconds to wait for a piped path before giving up

def read_line(stream, handoff):
    '''
    desc: blocking read of one line, result (or failure) goes into the handoff queue
    params:
        stream = file-like object to read from
        handoff = single-slot queue shared with the waiting thread
    return: none
    '''

    try:
        handoff.put(stream.readline())
    except (OSError, ValueError) as e:
        handoff.put(e)

def resolve_source(src, stream=None, timeout=STDIN_TIMEOUT):
    '''
    desc: pick the image path, either the explicit argument or one line from stdin
    params:
        src = path given on the command line (may be None or empty)
        stream = where to read the fallback line from, sys.stdin if None
        timeout = seconds to wait for the line to show up
    return: path string
    '''

    if src:
        return src

    stream = sys.stdin if stream is None else stream
    if stream is None:
        print(ERRORS["no_source_hint"])
        raise IoError(ERRORS["no_source"])

    handoff = Queue(maxsize=1)
    # daemon: a read still blocked after the timeout must not hold up exit
    reader = threading.Thread(target=read_line, args=(stream, handoff), daemon=True)
    reader.start()

    try:
        line = handoff.get(timeout=timeout)
    except Empty:
        line = ''

    if isinstance(line, Exception):
        raise IoError(str(line))

    # '' means nothing arrived (timeout or EOF), a bare newline is an empty line
    if not line:
        print(ERRORS["no_source_hint"])
        raise IoError(ERRORS["no_source"])

    line = line.strip()
    if not line:
        raise IoError(ERRORS["empty_source"])

    return line
