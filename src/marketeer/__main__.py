# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : __main__.py
#   file_relpath : src/marketeer/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Module entry point for running the unlocker via ``python -m marketeer``.

Delegates to :func:`marketeer.cli.main.cli`, the same entry point used by the
``x4-marketeer-unlocker`` console script.

Examples:
    Unlock all marketeers in a save::

        python -m marketeer ~/Documents/Egosoft/X4/12345678/save/quicksave.xml.gz
"""

from __future__ import annotations

from marketeer.cli.main import cli

if __name__ == "__main__":
    cli()
