"""
Matrix serialization.

Public API:
    dump_text(m, fp) / dumps_text(m)        - text encode
    load_text(fp) / loads_text(s)           - text decode
    dump_binary(m, fp) / dumps_binary(m)    - big-endian binary encode
    load_binary(fp) / loads_binary(b)       - big-endian binary decode
    save(m, path) / load(path)              - file helpers, format from suffix
"""

from densematrix.io.text import dump_text, dumps_text, load_text, loads_text
from densematrix.io.binary import dump_binary, dumps_binary, load_binary, loads_binary
from densematrix.io.files import save, load

__all__ = [
    "dump_text",
    "dumps_text",
    "load_text",
    "loads_text",
    "dump_binary",
    "dumps_binary",
    "load_binary",
    "loads_binary",
    "save",
    "load",
]
