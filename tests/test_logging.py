# tests/test_logging.py

from __future__ import annotations

from genealogy_tree.logging import get_logger, list_active_loggers


def test_short_names_are_namespaced():
    short = get_logger("test_module")
    full = get_logger("genealogy_tree.test_module")
    assert short is full
    assert short.name == "genealogy_tree.test_module"
    assert "genealogy_tree.test_module" in list_active_loggers()


def test_module_handler_attached_once():
    get_logger("test_once")
    logger = get_logger("test_once")
    assert sum(1 for h in logger.handlers if getattr(h, "is_module_handler", False)) == 1
