"""Tests for evaluator factory loading."""

import pytest

from repl_console.evaluators import EvaluatorLoadError, load_evaluator_factory
from repl_console.evaluators.python_evaluator import PythonEvaluator


class TestLoadEvaluatorFactory:
    """Test load_evaluator_factory."""

    def test_loads_class_by_path(self):
        factory = load_evaluator_factory(
            "repl_console.evaluators.python_evaluator:PythonEvaluator"
        )

        assert factory is PythonEvaluator

    def test_loads_nested_attribute(self):
        factory = load_evaluator_factory(
            "repl_console.evaluators.python_evaluator:PythonEvaluator.evaluate"
        )

        assert factory is PythonEvaluator.evaluate

    @pytest.mark.parametrize("spec", ["no_colon", ":Attr", "module:", ""])
    def test_malformed_spec(self, spec):
        with pytest.raises(EvaluatorLoadError, match="expected 'module:attribute'"):
            load_evaluator_factory(spec)

    def test_missing_module(self):
        with pytest.raises(EvaluatorLoadError, match="Cannot import"):
            load_evaluator_factory("repl_console.does_not_exist:Thing")

    def test_missing_attribute(self):
        with pytest.raises(EvaluatorLoadError, match="has no attribute"):
            load_evaluator_factory("repl_console.evaluators.python_evaluator:Nope")

    def test_non_callable(self):
        with pytest.raises(EvaluatorLoadError, match="not callable"):
            load_evaluator_factory("repl_console.evaluators.python_evaluator:io")
