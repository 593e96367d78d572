"""
Tests for the docstring annotation scanner
"""

import types

from paramount.annotations import exported_names, scan_docstring, scan_module


def documented(options, count):
    """
    Do something.

    @param {Object}  [options]        Options
    @param {Number}  [options.limit]  Limit
      @param {Integer} [count]
    @parax {String} [ignored]
    @returns {String}
    """


def undocumented():
    pass


def no_params():
    """Docstring without declarations."""


class TestScanDocstring:
    """Test scan_docstring()."""

    def test_collects_param_lines_in_order(self):
        assert scan_docstring(documented) == [
            "{Object}  [options]        Options",
            "{Number}  [options.limit]  Limit",
            "{Integer} [count]",
        ]

    def test_missing_docstring(self):
        assert scan_docstring(undocumented) is None

    def test_docstring_without_params(self):
        assert scan_docstring(no_params) is None


class TestScanModule:
    """Test module-level scanning."""

    def _module(self, with_all: bool = False) -> types.ModuleType:
        module = types.ModuleType("bindings")
        module.documented = documented
        module.no_params = no_params
        module.LIMIT = 10
        module._private = documented
        module.json = types.ModuleType("json")
        if with_all:
            module.__all__ = ["documented", "LIMIT"]
        return module

    def test_exported_names_without_all(self):
        assert exported_names(self._module()) == ["documented", "no_params", "LIMIT"]

    def test_exported_names_with_all(self):
        assert exported_names(self._module(with_all=True)) == ["documented", "LIMIT"]

    def test_scan_module(self):
        result = scan_module(self._module())

        assert list(result) == ["documented", "no_params", "LIMIT"]
        assert len(result["documented"]) == 3
        assert result["no_params"] is None
        assert result["LIMIT"] is None

    def test_scan_module_with_absent_name(self):
        result = scan_module(self._module(), names=["documented", "missing"])

        assert result["missing"] is None
