# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : __init__.py
#   file_relpath : src/marketeer/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Framework-agnostic building blocks shared by the pipeline, API and CLI."""
