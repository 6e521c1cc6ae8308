"""General utility functions."""

import importlib
from typing import Any

__all__ = ("import_string",)


def import_string(dotted_path: str) -> "Any":
    """Dotted Path Import.

    Import a dotted module path and return the attribute/class designated by the
    remaining names in the path. Nested class paths such as ``pkg.mod.Outer.Inner``
    are supported.

    Args:
        dotted_path: The path of the object to import.

    Raises:
        ImportError: Could not import the module or find the attribute.

    Returns:
        object: The imported object.
    """
    parts = dotted_path.split(".")
    for i in range(len(parts) - 1, 0, -1):
        module_path = ".".join(parts[:i])
        try:
            module = importlib.import_module(module_path)
            break
        except ModuleNotFoundError:
            continue
    else:
        msg = f"{dotted_path} doesn't look like a module path"
        raise ImportError(msg)

    obj: Any = module
    for attr in parts[i:]:
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            msg = f"Module '{module.__name__}' has no attribute '{attr}' in '{dotted_path}'"
            raise ImportError(msg) from e
    return obj
