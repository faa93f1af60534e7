"""Assembles the registry for a profile."""

from config.settings import Profile
from tools.business import business_tools
from tools.generic import generic_tools
from tools.registry import ToolRegistry


def build_registry(profile: Profile) -> ToolRegistry:
    """
    Build the tool registry for the given profile.

    Generic tools are always present. Optix business tools (mutation tools
    included) are added when the profile enables extended tools; whether a
    mutation may actually run is decided per call by the dispatcher.
    """
    tools = generic_tools()
    if profile.enables_extended_tools:
        tools.extend(business_tools())
    return ToolRegistry(tools)
