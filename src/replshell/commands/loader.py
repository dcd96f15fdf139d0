"""
Command loader - discovers command handlers and fills the command table.

Sources, in load order:

1. Built-in commands: every submodule of ``replshell.commands.builtins``
2. External modules listed in ``command_modules`` (dotted names or paths)
3. Plugin packages in ``commands_dir``: each subdirectory with an __init__.py

A module contributes every concrete CommandHandler subclass it defines.
External modules opt in with a module-level marker::

    # my_commands.py
    from replshell import CommandHandler

    __repl_commands__ = True

    class PingCommand(CommandHandler):
        name = "ping"
        description = "Answers with pong."

        async def handle(self, args, cancel):
            self.console.write_line("pong")

A source that fails to load is logged and skipped; loading carries on with
the remaining sources.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import Optional, Union

from replshell.commands.base import CommandHandler, ShellContext
from replshell.commands.registry import CommandRegistry
from replshell.core.exceptions import CommandLoadError, RegistryFrozenError

logger = logging.getLogger(__name__)

# Module attribute that marks a plugin module as containing shell commands
PLUGIN_MARKER = "__repl_commands__"

# Module name prefix for plugin packages loaded from commands_dir
PLUGIN_PREFIX = "replshell_cmd"

BUILTINS_PACKAGE = "replshell.commands.builtins"

CommandSource = Union[str, Path, ModuleType, type]


def is_command_class(obj: object) -> bool:
    """True for concrete CommandHandler subclasses (never the base itself)."""
    return (
        inspect.isclass(obj)
        and issubclass(obj, CommandHandler)
        and obj is not CommandHandler
        and not inspect.isabstract(obj)
    )


def has_marker(module: ModuleType) -> bool:
    return getattr(module, PLUGIN_MARKER, False) is True


def find_command_classes(module: ModuleType) -> list[type[CommandHandler]]:
    """Command classes defined in a module, in definition order.

    Classes imported into the module from elsewhere are skipped so a shared
    base or another plugin's command is not registered twice.
    """
    return [
        obj for obj in vars(module).values()
        if is_command_class(obj) and obj.__module__ == module.__name__
    ]


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover plugin packages in the given directory.

    Each plugin must be in its own subdirectory with an __init__.py file.

    Args:
        commands_dir: Directory to search

    Returns:
        List of __init__.py paths, sorted by directory name.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            cmd_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return cmd_paths


def load_module_from_path(path: Path, prefix: str = PLUGIN_PREFIX) -> ModuleType:
    """
    Import a plugin from a file or package directory.

    Args:
        path: A ``.py`` file, a package ``__init__.py`` or a package directory.
        prefix: Module name prefix for sys.modules

    Raises:
        CommandLoadError: If the file is missing or fails to execute.
    """
    if path.is_dir():
        path = path / "__init__.py"
    if not path.is_file():
        raise CommandLoadError(str(path), "File not found")

    stem = path.parent.name if path.name == "__init__.py" else path.stem
    module_name = f"{prefix}.{stem}"

    spec = spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise CommandLoadError(str(path), "Could not create module spec")

    module = module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except SyntaxError as e:
        del sys.modules[module_name]
        raise CommandLoadError(str(path), f"Syntax error: {e}") from e
    except ImportError as e:
        del sys.modules[module_name]
        raise CommandLoadError(str(path), f"Import error: {e}") from e
    except Exception as e:
        del sys.modules[module_name]
        raise CommandLoadError(str(path), f"Error: {e}") from e
    return module


def import_source(source: str) -> ModuleType:
    """Import an external source given as a dotted module name or a path."""
    if source.endswith(".py") or "/" in source or "\\" in source:
        return load_module_from_path(Path(source).expanduser())

    try:
        return importlib.import_module(source)
    except SyntaxError as e:
        raise CommandLoadError(source, f"Syntax error: {e}") from e
    except ImportError as e:
        raise CommandLoadError(source, f"Import error: {e}") from e
    except Exception as e:
        raise CommandLoadError(source, f"Error: {e}") from e


class CommandLoader:
    """Builds command handler instances from sources into a CommandRegistry."""

    def __init__(
        self,
        context: ShellContext,
        registry: Optional[CommandRegistry] = None,
        strict: Optional[bool] = None,
    ):
        self.context = context
        self.registry = registry if registry is not None else CommandRegistry()
        self.strict = context.config.strict_discovery if strict is None else strict

    def register(self, source: CommandSource, external: bool = True) -> int:
        """
        Register every command a source provides.

        Args:
            source: A CommandHandler subclass, a module, a dotted module name,
                or a path to a plugin file/package.
            external: Apply the plugin marker check (strict mode only).

        Returns:
            Number of commands registered; 0 if the source failed to load.
        """
        label = _describe(source)
        try:
            if inspect.isclass(source):
                return self._register_classes([source], label)

            if isinstance(source, ModuleType):
                module = source
            elif isinstance(source, Path):
                module = load_module_from_path(source)
            else:
                module = import_source(source)

            if external and self.strict and not has_marker(module):
                logger.warning(f"Skipping '{label}': module does not set {PLUGIN_MARKER} = True")
                return 0

            return self._register_classes(find_command_classes(module), label)
        except CommandLoadError as e:
            logger.error(f"Failed to load command source '{label}': {e}")
            return 0

    def _register_classes(self, classes: list[type], label: str) -> int:
        count = 0
        for cls in classes:
            try:
                self.registry.register(self._instantiate(cls))
            except (CommandLoadError, RegistryFrozenError) as e:
                logger.error(f"Failed to load command source '{label}': {e}")
                continue
            logger.debug(f"Add '{cls.__module__}.{cls.__qualname__}' from '{label}'")
            count += 1
        return count

    def _instantiate(self, cls: type) -> CommandHandler:
        """Build a handler, raising CommandLoadError if it cannot be used."""
        if not is_command_class(cls):
            raise CommandLoadError(repr(cls), "not a concrete CommandHandler")
        source = f"{cls.__module__}.{cls.__qualname__}"
        try:
            handler = cls(self.context)
            name = handler.name
        except Exception as e:
            raise CommandLoadError(source, f"{type(e).__name__}: {e}") from e
        if not name:
            raise CommandLoadError(source, "command name must not be empty")
        return handler

    def register_builtins(self) -> int:
        """Register the commands shipped in replshell.commands.builtins."""
        package = importlib.import_module(BUILTINS_PACKAGE)
        total = 0
        for info in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
            total += self.register(f"{BUILTINS_PACKAGE}.{info.name}", external=False)
        return total

    def register_directory(self, commands_dir: Path) -> int:
        """Register every plugin package found in a commands directory."""
        total = 0
        for init_file in discover_commands(commands_dir):
            total += self.register(init_file.parent)
        return total

    def load_all(self) -> CommandRegistry:
        """
        Load built-ins, configured modules and the plugin directory.

        Returns:
            The populated registry.
        """
        config = self.context.config
        total = self.register_builtins()

        for name in config.command_modules:
            total += self.register(name)

        if config.commands_dir:
            total += self.register_directory(Path(config.commands_dir).expanduser())

        logger.info(f"Loaded {total} commands ({len(self.registry)} unique names)")
        return self.registry


def _describe(source: CommandSource) -> str:
    if inspect.isclass(source):
        return f"{source.__module__}.{source.__qualname__}"
    if isinstance(source, ModuleType):
        return source.__name__
    return str(source)
