"""
Built-in commands package.

Each command lives in its own subpackage; the loader imports every
subpackage and registers the CommandHandler classes it defines.
"""
