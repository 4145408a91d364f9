# topmark:header:start
#
#   project      : X4 Marketeer Unlocker
#   file         : __init__.py
#   file_relpath : src/marketeer/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Robert Peter Meyer
#
# topmark:header:end

"""Save-file processing pipeline: context, statuses, steps and runner."""
