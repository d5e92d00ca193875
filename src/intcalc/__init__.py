"""intcalc — checked 64-bit integer calculator for the command line.

Built around a pure checked-arithmetic engine with a strict layered
architecture.
"""

from intcalc.version import __version__

__all__: list[str] = ["__version__"]
