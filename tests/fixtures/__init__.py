# topmark:header:start
#
#   project      : FieldScope
#   file         : __init__.py
#   file_relpath : tests/fixtures/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

