# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : __init__.py
#   file_relpath : src/marketeer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""X4 Marketeer Unlocker package.

Patches the compressed XML save files written by *X4: Foundations* so that every
black marketeer ("shady guy") NPC shows its trade offers. Exposes a CLI and a
small typed API (`marketeer.api.unlock_save`).
"""

from __future__ import annotations
