"""Renderer strategies: mount, shallow and string."""

from inspectree.renderers.mount import MountRenderer
from inspectree.renderers.passthrough import PassthroughHost
from inspectree.renderers.shallow import ShallowRenderer
from inspectree.renderers.string import StringRenderer

__all__ = ["MountRenderer", "PassthroughHost", "ShallowRenderer", "StringRenderer"]
