"""
Optional command plugins.

Enable a plugin by listing its module in ``command_modules``, e.g.
``"replshell.contrib.prompt"``.
"""
