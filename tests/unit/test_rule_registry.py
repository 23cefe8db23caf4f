"""Unit tests for rule lookup by ID."""

import pytest

from formrules.models.schemas import UploadedFile
from formrules.rules.image_rules import image_validator
from formrules.rules.rule_registry import RULE_REGISTRY, get_rule


class TestRuleRegistry:
    def test_image_rule_registered(self):
        assert RULE_REGISTRY["IMAGE_EXTENSION"] is image_validator

    def test_get_rule_runs(self):
        rule = get_rule("IMAGE_EXTENSION")
        assert rule([UploadedFile(name="a.png")]) is True

    def test_unknown_rule(self):
        with pytest.raises(KeyError, match="IMAGE_EXTENSION"):
            get_rule("MAX_SIZE")
