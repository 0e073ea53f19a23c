"""Opt-in publication of the typeh API into a shared namespace."""

import builtins
import logging
import warnings
from types import ModuleType
from typing import Any, MutableMapping, Optional, Union

logger = logging.getLogger(__name__)

Target = Union[ModuleType, MutableMapping[str, Any]]

_SELF = ("install", "uninstall")

# Values displaced by install(overwrite=True), per target namespace.
_displaced: dict[int, dict[str, Any]] = {}


def _namespace(target: Optional[Target]) -> MutableMapping[str, Any]:
    if target is None:
        return vars(builtins)
    if isinstance(target, ModuleType):
        return vars(target)
    return target


def exports() -> dict[str, Any]:
    """Every public typeh name with its object."""
    # Import here to avoid circular dependency
    import typeh
    return {name: getattr(typeh, name) for name in typeh.__all__ if name not in _SELF}


def install(target: Optional[Target] = None, *, overwrite: bool = False) -> list[str]:
    """
    Copy the typeh API onto a namespace so scripts can use it unqualified.

    Args:
        target: Module or mapping to write into; defaults to ``builtins``
        overwrite: Replace names the target already defines

    Returns:
        Names that were written

    Names already present are left alone unless ``overwrite`` is set, so the
    default call never replaces Python's own ``int``, ``float`` or ``bool``.
    On the default target those names are skipped quietly; on other targets
    a RuntimeWarning lists them. Displaced values are kept so ``uninstall``
    can put them back.

    Example:
        install()                # is_int, _string, validate_map ... everywhere
        install(globals())       # only into the calling module
    """
    namespace = _namespace(target)
    displaced = _displaced.get(id(namespace), {})
    written = []
    skipped = []

    for name, value in exports().items():
        if name in namespace and namespace[name] is not value:
            if not overwrite:
                if target is not None:
                    skipped.append(name)
                continue
            displaced.setdefault(name, namespace[name])
        namespace[name] = value
        written.append(name)

    if displaced:
        _displaced[id(namespace)] = displaced

    if skipped:
        warnings.warn(
            f"typeh.install skipped names already defined: {', '.join(skipped)}",
            RuntimeWarning,
            stacklevel=2,
        )

    logger.debug("installed %d typeh names", len(written))
    return written


def uninstall(target: Optional[Target] = None) -> list[str]:
    """Remove names that ``install`` placed on a namespace, restoring what they replaced."""
    namespace = _namespace(target)
    displaced = _displaced.pop(id(namespace), {})
    removed = []
    for name, value in exports().items():
        if namespace.get(name) is value:
            if name in displaced:
                namespace[name] = displaced[name]
            else:
                del namespace[name]
            removed.append(name)
    return removed
