"""Lets ``import regen`` work from a source checkout without installing.

The real package lives in ``src/regen``; this stub points the package path
there and runs its ``__init__`` so the public names match an installed copy.
"""
from __future__ import annotations

from pathlib import Path

_SRC_PACKAGE = Path(__file__).resolve().parents[1] / "src" / "regen"
__path__ = [str(_SRC_PACKAGE)]
__file__ = str(_SRC_PACKAGE / "__init__.py")

with open(__file__, "r", encoding="utf-8") as _init:
    exec(compile(_init.read(), __file__, "exec"), globals(), globals())
del _init
