"""
minecraft_assets is a pack-access library for the `assets/` directory of
Minecraft: Java Edition, and of resource packs following the same layout.
"""

from .core import *
from .minecraft_assets import *
