"""Script de ejecución para desarrollo: `python src/main.py [menu|list|config]`."""

from __future__ import annotations

import sys

# Las descripciones en ruso/español necesitan UTF-8 en consolas cp1252 de Windows.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
