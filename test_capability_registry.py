"""
Tests for the role capability registry.
"""

import pytest

from models import Role, FunctionName as F
from capability_registry import ROLE_CAPABILITIES, DEFAULT_PROFILE, capabilities_for
from handlers import FUNCTION_HANDLERS


class TestCapabilityRegistry:

    @pytest.mark.parametrize("role", ["farmer", "Farmer", " FARMER ", Role.FARMER])
    def test_role_lookup_is_case_and_type_tolerant(self, role):
        assert capabilities_for(role) is ROLE_CAPABILITIES[Role.FARMER]

    @pytest.mark.parametrize("role", ["guest", "", None, 42])
    def test_unknown_role_gets_empty_profile(self, role):
        profile = capabilities_for(role)
        assert profile is DEFAULT_PROFILE
        assert profile.functions == frozenset()

    def test_role_function_sets(self):
        assert F.FETCH_CROP_ADVICE in capabilities_for("farmer").functions
        assert F.FETCH_CROP_ADVICE not in capabilities_for("consumer").functions
        assert F.TRACK_ORDER in capabilities_for("consumer").functions
        assert F.CHECK_INVENTORY in capabilities_for("warehouse").functions
        assert F.CREATE_PAYMENT not in capabilities_for("warehouse").functions
        assert F.VIEW_LOGS in capabilities_for("admin").functions

    def test_every_granted_function_has_a_handler(self):
        for profile in ROLE_CAPABILITIES.values():
            assert profile.functions <= set(FUNCTION_HANDLERS)

    def test_every_handler_is_granted_to_some_role(self):
        granted = set().union(*(p.functions for p in ROLE_CAPABILITIES.values()))
        assert set(FUNCTION_HANDLERS) == granted

    def test_profiles_are_immutable(self):
        profile = capabilities_for("admin")
        with pytest.raises(Exception):
            profile.context_description = "changed"
        assert isinstance(profile.functions, frozenset)
