import os
import unittest

from minecraft_assets import *

CONTENT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'content')


class TestResourceIdentifier(unittest.TestCase):
    def test_default_namespace(self):
        identifier = ResourceIdentifier('oak_planks')

        self.assertFalse(identifier.has_namespace)
        self.assertEqual(identifier.namespace, 'minecraft')
        self.assertEqual(identifier.path, 'oak_planks')
        self.assertEqual(identifier.canonical, 'minecraft:oak_planks')

    def test_explicit_namespace(self):
        identifier = ResourceIdentifier('mymod:block/machine')

        self.assertTrue(identifier.has_namespace)
        self.assertEqual(identifier.namespace, 'mymod')
        self.assertEqual(identifier.path, 'block/machine')
        self.assertEqual(str(identifier), 'mymod:block/machine')

    def test_empty_namespace(self):
        self.assertEqual(ResourceIdentifier(':stone').namespace, 'minecraft')

    def test_equality(self):
        self.assertEqual(ResourceIdentifier('oak_planks'), ResourceIdentifier('minecraft:oak_planks'))
        self.assertNotEqual(ResourceIdentifier('oak_planks'), ResourceIdentifier('mymod:oak_planks'))
        self.assertEqual(
            len({ResourceIdentifier('stone'), ResourceIdentifier('minecraft:stone')}), 1
        )

    def test_not_equal_to_strings(self):
        """
        Equal objects must hash alike, so plain strings are never equal.
        """
        self.assertNotEqual(ResourceIdentifier('stone'), 'stone')
        self.assertNotEqual(ResourceIdentifier('stone'), 'minecraft:stone')
        self.assertNotIn(ResourceIdentifier('stone'), {'stone', 'minecraft:stone'})
        self.assertIn(ResourceIdentifier('stone'), {ResourceIdentifier('minecraft:stone')})
        self.assertEqual(str(ResourceIdentifier('stone')), 'minecraft:stone')

    def test_copy(self):
        identifier = ResourceIdentifier('mymod:machine')
        self.assertEqual(ResourceIdentifier(identifier).identifier, 'mymod:machine')

    def test_not_a_string(self):
        with self.assertRaises(TypeError):
            ResourceIdentifier(5)


class TestResourceLocation(unittest.TestCase):
    def test_blockstates_path(self):
        """
        The default namespace is used when the identifier has none, so both
        forms resolve to the same file.
        """
        implicit = ResourceLocation.blockstates('oak_planks')
        explicit = ResourceLocation.blockstates('minecraft:oak_planks')

        expected = os.path.join(CONTENT, 'assets', 'minecraft', 'blockstates', 'oak_planks.json')
        self.assertEqual(implicit.path(CONTENT), expected)
        self.assertEqual(explicit.path(CONTENT), expected)
        self.assertEqual(implicit, explicit)

    def test_model_prefix(self):
        expected = os.path.join(CONTENT, 'assets', 'minecraft', 'models', 'block', 'cube_all.json')

        for identifier in ['cube_all', 'block/cube_all', 'minecraft:block/cube_all']:
            location = ResourceLocation.block_model(identifier)
            self.assertEqual(location.name, 'cube_all')
            self.assertEqual(location.path(CONTENT), expected)

    def test_model_prefix_of_other_kind(self):
        # An item prefix is not stripped from a block model
        location = ResourceLocation.block_model('item/diamond_hoe')
        self.assertEqual(location.name, 'item/diamond_hoe')

    def test_model_subfolder(self):
        location = ResourceLocation.block_model('mymod:block/parts/gear')

        self.assertEqual(location.namespace, 'mymod')
        self.assertEqual(location.name, 'parts/gear')
        self.assertEqual(
            location.path(CONTENT),
            os.path.join(CONTENT, 'assets', 'mymod', 'models', 'block', 'parts', 'gear.json')
        )

    def test_model_reference(self):
        self.assertIs(ResourceLocation.model_reference('block/oak_planks', ITEM_MODEL).kind, BLOCK_MODEL)
        self.assertIs(ResourceLocation.model_reference('minecraft:item/generated').kind, ITEM_MODEL)

        # No prefix keeps the kind of the referencing model
        self.assertIs(ResourceLocation.model_reference('oak_planks', ITEM_MODEL).kind, ITEM_MODEL)
        self.assertIs(ResourceLocation.model_reference('oak_planks').kind, BLOCK_MODEL)

    def test_builtin(self):
        self.assertTrue(ResourceLocation.item_model('builtin/generated').is_builtin)
        self.assertTrue(ResourceLocation.model_reference('builtin/entity', ITEM_MODEL).is_builtin)
        self.assertFalse(ResourceLocation.item_model('item/generated').is_builtin)
        self.assertFalse(ResourceLocation.texture('builtin/generated').is_builtin)

    def test_texture_paths(self):
        self.assertEqual(
            ResourceLocation.texture('block/stone').path(CONTENT),
            os.path.join(CONTENT, 'assets', 'minecraft', 'textures', 'block', 'stone.png')
        )
        self.assertEqual(
            ResourceLocation.texture_meta('block/water_still').path(CONTENT),
            os.path.join(CONTENT, 'assets', 'minecraft', 'textures', 'block', 'water_still.png.mcmeta')
        )

    def test_display(self):
        location = ResourceLocation.block_model('block/cube_all')
        self.assertEqual(str(location), 'minecraft:cube_all')
        self.assertEqual(repr(location), "BlockModel('block/cube_all')")


class TestResolve(unittest.TestCase):
    def test_resolve(self):
        self.assertEqual(
            resolve('root', 'minecraft', BLOCK_MODEL, 'cube'),
            os.path.join('root', 'assets', 'minecraft', 'models', 'block', 'cube.json')
        )

    def test_resolve_nested_name(self):
        self.assertEqual(
            resolve('root', 'mymod', TEXTURE, 'block/machine/front'),
            os.path.join('root', 'assets', 'mymod', 'textures', 'block', 'machine', 'front.png')
        )

    def test_resolve_does_not_touch_filesystem(self):
        path = resolve('does/not/exist', 'minecraft', BLOCKSTATES, 'stone')
        self.assertFalse(os.path.exists(path))

    def test_kinds(self):
        self.assertTrue(BLOCK_MODEL.is_model)
        self.assertTrue(ITEM_MODEL.is_model)
        self.assertFalse(BLOCKSTATES.is_model)
        self.assertFalse(TEXTURE.is_model)
        self.assertEqual(len(RESOURCE_KINDS), 5)
        self.assertTrue(all(kind.category == 'assets' for kind in RESOURCE_KINDS))


if __name__ == '__main__':
    unittest.main()
