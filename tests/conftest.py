"""Shared pytest fixtures for simplemcp tests."""

import logging

import pytest

from simplemcp.rpc.dispatcher import Dispatcher
from simplemcp.skill.builtin import register_builtin_skills
from simplemcp.skill.registry import SkillRegistry


@pytest.fixture
def registry() -> SkillRegistry:
    """Registry populated with the built-in tools."""
    reg = SkillRegistry()
    register_builtin_skills(reg)
    return reg


@pytest.fixture
def dispatcher(registry: SkillRegistry) -> Dispatcher:
    return Dispatcher(registry)


@pytest.fixture
def restore_package_logger():
    """Undo handler/propagation changes made to the simplemcp logger."""
    package_logger = logging.getLogger("simplemcp")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in list(package_logger.handlers):
        if handler not in handlers:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(level)
    package_logger.propagate = propagate
