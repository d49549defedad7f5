"""Evaluator plug-ins and the loader that resolves them from settings."""

import functools
import importlib
import logging

from ..core.session import EvaluatorFactory

LOGGER = logging.getLogger(__name__)


class EvaluatorLoadError(Exception):
    """Raised when an evaluator factory path cannot be resolved."""


def load_evaluator_factory(spec: str) -> EvaluatorFactory:
    """Resolve an evaluator factory from a ``module:attribute`` path.

    Args:
        spec: Import path such as ``package.module:EvaluatorClass``

    Returns:
        Callable building an evaluator from an output sink

    Raises:
        EvaluatorLoadError: If the path is malformed, cannot be imported, or
            does not name a callable
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise EvaluatorLoadError(
            f"Invalid evaluator '{spec}': expected 'module:attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EvaluatorLoadError(
            f"Cannot import evaluator module '{module_name}': {e}"
        ) from e

    try:
        factory = functools.reduce(getattr, attr_path.split("."), module)
    except AttributeError as e:
        raise EvaluatorLoadError(
            f"Module '{module_name}' has no attribute '{attr_path}'"
        ) from e

    if not callable(factory):
        raise EvaluatorLoadError(f"Evaluator '{spec}' is not callable")

    LOGGER.debug("Loaded evaluator factory %s", spec)
    return factory


__all__ = ["EvaluatorLoadError", "load_evaluator_factory"]
