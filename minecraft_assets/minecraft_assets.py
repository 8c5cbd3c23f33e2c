from __future__ import annotations

import os
import logging

from typing import Iterator, Tuple, Union

from .core import *

logger = logging.getLogger(__name__)

MINECRAFT_NAMESPACE = "minecraft"

# Vanilla chains are around five models deep
MAX_PARENT_DEPTH = 64

MODEL_KINDS = {
    "block": BLOCK_MODEL,
    "item": ITEM_MODEL,
}


class ResourceIdentifier():
    """
    An identifier such as 'oak_planks' or 'mymod:block/machine'.

    The namespace is the text before the first ':' and defaults to
    'minecraft'. Identifiers compare equal when their namespace and path do,
    so 'oak_planks' == 'minecraft:oak_planks'. Plain strings never compare
    equal; wrap them in a ResourceIdentifier first.
    """

    def __init__(self, identifier: Union[str, ResourceIdentifier]) -> None:
        if isinstance(identifier, ResourceIdentifier):
            identifier = identifier.identifier
        if not isinstance(identifier, str):
            raise TypeError(f"Identifier must be a string, not {type(identifier).__name__}.")

        self.identifier = identifier

    @property
    def has_namespace(self) -> bool:
        return ":" in self.identifier

    @property
    def namespace(self) -> str:
        if self.has_namespace:
            return self.identifier.split(":", 1)[0] or MINECRAFT_NAMESPACE
        return MINECRAFT_NAMESPACE

    @property
    def path(self) -> str:
        return self.identifier.split(":", 1)[-1]

    @property
    def canonical(self) -> str:
        return f"{self.namespace}:{self.path}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResourceIdentifier):
            return NotImplemented
        return self.canonical == other.canonical

    def __hash__(self) -> int:
        return hash(self.canonical)

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return f"ResourceIdentifier('{self.identifier}')"


class ResourceLocation():
    """
    A ResourceIdentifier paired with the kind of asset it points to. This is
    enough to compute the path of the asset inside any pack.

    For models, a leading 'block/' or 'item/' matching the kind is dropped, so
    'cube_all', 'block/cube_all' and 'minecraft:block/cube_all' are the same
    block model.
    """

    def __init__(self, kind: ResourceKind, identifier: Union[str, ResourceIdentifier]) -> None:
        self.kind = kind
        self.identifier = ResourceIdentifier(identifier)

    @classmethod
    def blockstates(cls, block_id) -> ResourceLocation:
        return cls(BLOCKSTATES, block_id)

    @classmethod
    def block_model(cls, model_id) -> ResourceLocation:
        return cls(BLOCK_MODEL, model_id)

    @classmethod
    def item_model(cls, model_id) -> ResourceLocation:
        return cls(ITEM_MODEL, model_id)

    @classmethod
    def texture(cls, texture_id) -> ResourceLocation:
        return cls(TEXTURE, texture_id)

    @classmethod
    def texture_meta(cls, texture_id) -> ResourceLocation:
        return cls(TEXTURE_META, texture_id)

    @classmethod
    def model_reference(cls, reference: str, default_kind: ResourceKind = BLOCK_MODEL) -> ResourceLocation:
        """
        Location of a model referenced from a blockstate, or from the 'parent'
        of another model. A 'block/' or 'item/' prefix picks the kind, anything
        else stays in `default_kind`.
        """
        identifier = ResourceIdentifier(reference)
        folder, _, rest = identifier.path.partition("/")
        if rest and folder in MODEL_KINDS:
            return cls(MODEL_KINDS[folder], identifier)
        return cls(default_kind, identifier)

    @property
    def namespace(self) -> str:
        return self.identifier.namespace

    @property
    def name(self) -> str:
        """
        The path of the asset, relative to the directory of its kind.
        """
        path = self.identifier.path
        if self.kind.is_model:
            folder, _, rest = path.partition("/")
            if rest and MODEL_KINDS.get(folder) is self.kind:
                return rest
        return path

    @property
    def is_builtin(self) -> bool:
        """
        Builtin models, like 'builtin/generated', are provided by the game and
        have no file.
        """
        return self.kind.is_model and self.identifier.path.startswith("builtin/")

    def path(self, root: str) -> str:
        return resolve(root, self.namespace, self.kind, self.name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ResourceLocation):
            return NotImplemented
        return (self.kind, self.namespace, self.name) == (other.kind, other.namespace, other.name)

    def __hash__(self) -> int:
        return hash((self.kind.name, self.namespace, self.name))

    def __str__(self) -> str:
        return f"{self.namespace}:{self.name}"

    def __repr__(self) -> str:
        return f"{self.kind.name}('{self.identifier.identifier}')"


## ----------- ##
## Blockstates ##
## ----------- ##

def state_value_string(value) -> str:
    """
    Block state values are strings in variant keys, but json booleans and
    numbers may appear in multipart conditions.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_variant_key(key: str) -> dict:
    """
    Splits a variant key like 'facing=north,half=top' into
    {'facing': 'north', 'half': 'top'}.

    Segments without '=' (the legacy 'normal' key) carry no properties.
    """
    properties = {}
    for segment in key.split(","):
        name, separator, value = segment.partition("=")
        if separator:
            properties[name] = value
    return properties


def format_variant_key(properties: dict) -> str:
    """
    Builds a variant key from a dict of properties, sorted by name the way the
    game writes them.
    """
    return ",".join(f"{name}={state_value_string(value)}" for name, value in sorted(properties.items()))


@ClassProperty('model', types=str, required=True)
@ClassProperty('x', types=int)
@ClassProperty('y', types=int)
@ClassProperty('uvlock', types=bool)
@ClassProperty('weight', types=int)
class ModelProperties(JsonSubResource):
    """
    One model entry of a variant: the model reference, plus optional
    rotation, uv lock and weight. Absent values read as None.
    """
    model: str
    x: int
    y: int
    uvlock: bool
    weight: int

    def validate(self):
        super().validate()
        if self.weight is not None and self.weight < 0:
            raise self.schema_error(f"Field 'weight' should not be negative, found {self.weight}.")

    @property
    def model_location(self) -> ResourceLocation:
        return ResourceLocation.model_reference(self.model, BLOCK_MODEL)


class Variant(tuple):
    """
    The ordered models of one variant. The json allows either a single object
    or an array of objects; both become a Variant, a single object giving a
    one-element Variant with `is_single` set.
    """

    def __new__(cls, models=(), single: bool = False):
        variant = super().__new__(cls, models)
        variant.is_single = single
        return variant

    @classmethod
    def from_json(cls, parent: JsonResource, json_path: str, data) -> Variant:
        if isinstance(data, dict):
            return cls([ModelProperties(parent=parent, json_path=json_path, data=data)], single=True)

        if isinstance(data, list):
            return cls(
                [ModelProperties(parent=parent, json_path=f"{json_path}/{i}", data=entry) for i, entry in enumerate(data)],
                single=False
            )

        raise parent.schema_error(f"'{json_path}' should be an object or array, found {type_name(data)}.")

    def to_json(self):
        """
        The json this variant was read from, in its original shape.
        """
        if self.is_single:
            return self[0].data
        return [model.data for model in self]

    def __repr__(self) -> str:
        return f"Variant({list(self)!r})"


class Condition(JsonSubResource):
    """
    A set of block state requirements, like {"north": "true", "east": "side|up"}.

    Every property must match. A value may list alternatives with '|', and a
    leading '!' negates it.
    """

    def validate(self):
        super().validate()
        for name, value in self.data.items():
            if not check_type(value, (str, bool, int)):
                raise self.schema_error(f"Condition '{name}' should be a string, found {type_name(value)}.")

    @property
    def properties(self) -> dict:
        return dict(self.data)

    def matches(self, properties: dict) -> bool:
        for name, expected in self.data.items():
            if name not in properties:
                return False

            expected = state_value_string(expected)
            negate = expected.startswith("!")
            if negate:
                expected = expected[1:]

            found = state_value_string(properties[name]) in expected.split("|")
            if found == negate:
                return False
        return True


class WhenClause(JsonSubResource):
    """
    The 'when' of a multipart case. Either a plain Condition, or an object
    holding a single "OR" or "AND" array. The entries of those arrays are
    themselves WhenClauses, so they may nest.
    """
    type_info = TypeInfo(jsonpath="when", attribute="when")

    OPERATORS = ("OR", "AND")

    def __init__(self, parent: JsonResource = None, json_path: str = None, data=None) -> None:
        super().__init__(parent=parent, json_path=json_path, data=data)

        if self.operator:
            self._conditions = [
                WhenClause(parent=self, json_path=path, data=data) for path, data in self.get_data_at(self.operator)
            ]
        else:
            self._conditions = [Condition(parent=self, json_path="", data=self.data)]

    def validate(self):
        super().validate()
        if self.operator and not isinstance(self.data[self.operator], list):
            raise self.schema_error(f"'{self.operator}' should be an array, found {type_name(self.data[self.operator])}.")

    @property
    def operator(self) -> str:
        """
        'OR', 'AND', or None for a plain condition.
        """
        if len(self.data) == 1:
            key = next(iter(self.data))
            if key in self.OPERATORS:
                return key
        return None

    def conditions(self) -> list:
        """
        For a plain condition, a list holding that Condition. Otherwise the
        WhenClauses of the operator.
        """
        return list(self._conditions)

    def matches(self, properties: dict) -> bool:
        if self.operator == "OR":
            return any(condition.matches(properties) for condition in self._conditions)
        return all(condition.matches(properties) for condition in self._conditions)


@SingleSubResource(WhenClause)
class Case(JsonSubResource):
    """
    One entry of a multipart blockstate: the models to `apply`, and `when`
    they apply. A case without `when` always applies.
    """
    type_info = TypeInfo(jsonpath="multipart", attribute="case")

    when: WhenClause

    def __init__(self, parent: JsonResource = None, json_path: str = None, data=None) -> None:
        super().__init__(parent=parent, json_path=json_path, data=data)
        self.apply = Variant.from_json(self, "apply", self.data["apply"])

    def validate(self):
        super().validate()
        if "apply" not in self.data:
            raise self.schema_error("Missing required field 'apply'.")

    def applies_to(self, properties: dict) -> bool:
        return self.when is None or self.when.matches(properties)


class BlockStates(JsonFileResource):
    """
    The contents of `assets/<namespace>/blockstates/<name>.json`.

    Blockstates are written either as 'variants', mapping a variant key to
    the models of that variant, or as 'multipart', a list of cases which each
    apply models under some condition. Exactly one of the two is present.
    """

    def __init__(self, data=None, filepath: str = None, location: ResourceLocation = None) -> None:
        super().__init__(data=data, filepath=filepath, location=location)

        self._variants = None
        self._cases = None

        if self.is_variants:
            self._variants = {
                key: Variant.from_json(self, f"variants/{key}", value)
                for key, value in self.data["variants"].items()
            }
        else:
            self._cases = [Case(parent=self, json_path=path, data=data) for path, data in self.get_data_at("multipart")]

    def validate(self):
        super().validate()

        has_variants = "variants" in self.data
        has_multipart = "multipart" in self.data

        if has_variants and has_multipart:
            raise self.schema_error("Blockstates may not have both 'variants' and 'multipart'.")
        if not has_variants and not has_multipart:
            raise self.schema_error("Blockstates need either 'variants' or 'multipart'.")

        if has_variants and not isinstance(self.data["variants"], dict):
            raise self.schema_error(f"Field 'variants' should be an object, found {type_name(self.data['variants'])}.")
        if has_multipart and not isinstance(self.data["multipart"], list):
            raise self.schema_error(f"Field 'multipart' should be an array, found {type_name(self.data['multipart'])}.")

    @property
    def is_variants(self) -> bool:
        return "variants" in self.data

    @property
    def is_multipart(self) -> bool:
        return "multipart" in self.data

    def variants(self) -> dict:
        """
        Returns the mapping from variant key to Variant.

        raises:
            WrongVariantError if the blockstates are multipart.
        """
        if self._variants is None:
            raise WrongVariantError(f"{self.filepath}: blockstates are multipart, not variants.")
        return dict(self._variants)

    def variant(self, key: str) -> Variant:
        """
        Gets the Variant with exactly this key, or None. Keys are compared as
        written in the file: no case folding and no reordering of properties.

        raises:
            WrongVariantError if the blockstates are multipart.
        """
        return self.variants().get(key)

    def cases(self) -> list:
        """
        Returns the cases of a multipart blockstate.

        raises:
            WrongVariantError if the blockstates are variants.
        """
        if self._cases is None:
            raise WrongVariantError(f"{self.filepath}: blockstates are variants, not multipart.")
        return list(self._cases)

    def models_for(self, properties: dict) -> list:
        """
        Every ModelProperties that applies to a block with these properties.

        For variants, those of each variant whose key is satisfied by the
        properties. For multipart, those of each case whose condition matches.
        """
        properties = {name: state_value_string(value) for name, value in properties.items()}
        models = []

        if self.is_variants:
            for key, variant in self._variants.items():
                required = parse_variant_key(key)
                if all(properties.get(name) == value for name, value in required.items()):
                    models.extend(variant)
        else:
            for case in self._cases:
                if case.applies_to(properties):
                    models.extend(case.apply)

        return models


## ------ ##
## Models ##
## ------ ##

@ClassProperty('origin', types=list)
@ClassProperty('axis', types=str)
@ClassProperty('angle', types=(int, float))
@ClassProperty('rescale', types=bool)
class ElementRotation(JsonSubResource):
    type_info = TypeInfo(jsonpath="rotation", attribute="rotation")


@ClassProperty('uv', types=list)
@ClassProperty('texture', types=str)
@ClassProperty('cullface', types=str)
@ClassProperty('rotation', types=int)
@ClassProperty('tintindex', types=int)
class Face(JsonSubResource):
    """
    One face of an element. The id of the face is its direction, such as
    'north' or 'up'.
    """
    type_info = TypeInfo(jsonpath="faces", attribute="face", container=dict)


@ClassProperty('from_', 'from', types=list, required=True)
@ClassProperty('to', types=list, required=True)
@ClassProperty('shade', types=bool)
@ClassProperty('light_emission', types=int)
@SingleSubResource(ElementRotation)
@ImplementsSubResource(Face)
class Element(JsonSubResource):
    """
    A cuboid of a model, going `from_` one corner `to` the other.
    """
    type_info = TypeInfo(jsonpath="elements", attribute="element", container=list)

    rotation: ElementRotation
    faces: list


@ClassProperty('rotation', types=list)
@ClassProperty('translation', types=list)
@ClassProperty('scale', types=list)
class Transform(JsonSubResource):
    """
    A display transform. The id is the display position, such as 'gui'.
    """
    type_info = TypeInfo(jsonpath="display", attribute="transform", plural="display", container=dict)


@ClassProperty('predicate', types=dict, required=True)
@ClassProperty('model', types=str, required=True)
class ItemOverride(JsonSubResource):
    type_info = TypeInfo(jsonpath="overrides", attribute="override", getter_attribute="model", container=list)


@ClassProperty('parent', types=str)
@ClassProperty('textures', types=dict)
@ClassProperty('ambient_occlusion', 'ambientocclusion', types=bool)
@ClassProperty('gui_light', types=str)
@ImplementsSubResource(Element, Transform, ItemOverride)
class Model(JsonFileResource):
    """
    The contents of `assets/<namespace>/models/<block|item>/<name>.json`.

    The parent is only a name. Use `resolve_parent_chain` to load the
    ancestors, and the `resolve_*` functions to combine them.
    """
    parent: str
    textures: dict
    ambient_occlusion: bool
    gui_light: str
    elements: list
    display: list
    overrides: list

    def validate(self):
        super().validate()
        for variable, value in (self.textures or {}).items():
            if not isinstance(value, str):
                raise self.schema_error(f"Texture '{variable}' should be a string, found {type_name(value)}.")

    @property
    def kind(self) -> ResourceKind:
        """
        BLOCK_MODEL or ITEM_MODEL. Models loaded by path take it from the
        nearest `models/<block|item>` folder above the file. In-memory models
        have no kind.
        """
        if self.location is not None:
            return self.location.kind
        if self.filepath is not None:
            return model_kind_of_path(self.filepath)
        return None

    @property
    def parent_location(self) -> ResourceLocation:
        """
        Location of the parent model, or None when there is no parent.
        """
        if self.parent is None:
            return None
        return ResourceLocation.model_reference(self.parent, self.kind or BLOCK_MODEL)

    def resolve_parent_chain(self, pack: AssetPack) -> list:
        return pack.resolve_parent_chain(self)

    def resolve_texture(self, pack: AssetPack, variable: str) -> str:
        return resolve_texture(self.resolve_parent_chain(pack), variable)

    def resolve_textures(self, pack: AssetPack) -> dict:
        return resolve_textures(self.resolve_parent_chain(pack))


def model_kind_of_path(path: str) -> ResourceKind:
    """
    The model kind of a file inside `.../models/block/` or `.../models/item/`,
    or None for files outside of those.
    """
    segments = os.path.normpath(os.path.abspath(path)).split(os.sep)
    for i in range(len(segments) - 2, 0, -1):
        if segments[i - 1] == "models" and segments[i] in MODEL_KINDS:
            return MODEL_KINDS[segments[i]]
    return None


def merge_textures(models: list) -> dict:
    """
    Combines the texture variables of a model chain (child first), children
    overriding their parents.
    """
    textures = {}
    for model in reversed(models):
        textures.update(model.textures or {})
    return textures


def _resolve_variable(textures: dict, variable: str) -> str:
    name = variable[1:] if variable.startswith("#") else variable
    seen = []

    while True:
        if name in seen:
            raise UnresolvedTextureVariableError(
                name, "Texture variables reference each other: #" + " -> #".join(seen + [name])
            )
        seen.append(name)

        if name not in textures:
            raise UnresolvedTextureVariableError(name)

        value = textures[name]
        if not value.startswith("#"):
            return value
        name = value[1:]


def resolve_texture(models: list, variable: str) -> str:
    """
    Resolves a texture variable of a model chain (as returned by
    `resolve_parent_chain`) to a texture path, following '#variable'
    references.

    raises:
        UnresolvedTextureVariableError if a variable in the way is undefined,
        or the references loop.
    """
    return _resolve_variable(merge_textures(models), variable)


def resolve_textures(models: list) -> dict:
    """
    Every texture variable of a model chain, resolved to a texture path.
    """
    textures = merge_textures(models)
    return {name: _resolve_variable(textures, name) for name in textures}


def resolve_elements(models: list) -> list:
    """
    The elements of the nearest model in the chain defining any. A model
    with elements replaces those of its parents.
    """
    for model in models:
        if model.elements is not None:
            return model.elements
    return None


def resolve_display(models: list) -> dict:
    """
    Display transforms by position, children overriding their parents.
    """
    display = {}
    for model in reversed(models):
        for transform in model.display or []:
            display[transform.id] = transform
    return display


def resolve_ambient_occlusion(models: list) -> bool:
    """
    The nearest explicit 'ambientocclusion' of the chain, or None.
    """
    for model in models:
        if model.ambient_occlusion is not None:
            return model.ambient_occlusion
    return None


## -------- ##
## Textures ##
## -------- ##

@ClassProperty('interpolate', types=bool)
@ClassProperty('width', types=int)
@ClassProperty('height', types=int)
@ClassProperty('frametime', types=int)
@ClassProperty('frames', types=list)
class AnimationMeta(JsonSubResource):
    type_info = TypeInfo(jsonpath="animation", attribute="animation")


@ClassProperty('blur', types=bool)
@ClassProperty('clamp', types=bool)
@ClassProperty('mipmaps', types=list)
class TextureOptions(JsonSubResource):
    type_info = TypeInfo(jsonpath="texture", attribute="texture")


@SingleSubResource(AnimationMeta)
@SingleSubResource(TextureOptions)
class TextureMeta(JsonFileResource):
    """
    The contents of a `textures/<name>.png.mcmeta` file.
    """
    animation: AnimationMeta
    texture: TextureOptions


## ---------- ##
## Asset Pack ##
## ---------- ##

class AssetPack():
    """
    Reads Minecraft assets from a single root directory: the directory which
    contains `assets/`, such as an extracted client jar or a resource pack.

    A pack holds nothing but its root. Every load reads the file again.
    """

    def __init__(self, root: str, max_parent_depth: int = MAX_PARENT_DEPTH) -> None:
        self.root = os.fspath(root)
        self.max_parent_depth = max_parent_depth

    @classmethod
    def at_path(cls, root: str) -> AssetPack:
        return cls(root)

    def __repr__(self) -> str:
        return f"AssetPack: {self.root}"

    def resolve(self, location: ResourceLocation) -> str:
        """
        The path of an asset in this pack. The file may not exist.
        """
        return location.path(self.root)

    def load_resource_at_path(self, path: str, cls: type = Model, location: ResourceLocation = None):
        """
        Loads a file as `cls` (BlockStates, Model or TextureMeta).

        raises:
            AssetNotFoundError if the file does not exist.
            AssetIOError if it cannot be read.
            ParseError if it is not valid json, or does not match `cls`.
        """
        return cls(filepath=os.fspath(path), location=location)

    def load_resource(self, location: ResourceLocation, cls: type):
        return self.load_resource_at_path(self.resolve(location), cls, location=location)

    def load_blockstates(self, block_id) -> BlockStates:
        """
        Loads the BlockStates of a block, such as 'stone' or 'minecraft:dirt'.
        """
        return self.load_resource(ResourceLocation.blockstates(block_id), BlockStates)

    def load_block_model(self, model_id) -> Model:
        """
        Loads a block model, such as 'cube_all' or 'block/cube_all'.
        """
        return self.load_resource(ResourceLocation.block_model(model_id), Model)

    def load_item_model(self, model_id) -> Model:
        """
        Loads an item model, such as 'diamond_hoe' or 'item/diamond_hoe'.
        """
        return self.load_resource(ResourceLocation.item_model(model_id), Model)

    def load_block_model_recursive(self, model_id) -> list:
        """
        Loads a block model followed by all its ancestors.
        """
        return self.resolve_parent_chain(self.load_block_model(model_id))

    def load_item_model_recursive(self, model_id) -> list:
        """
        Loads an item model followed by all its ancestors.
        """
        return self.resolve_parent_chain(self.load_item_model(model_id))

    def load_texture_meta(self, texture_id) -> TextureMeta:
        return self.load_resource(ResourceLocation.texture_meta(texture_id), TextureMeta)

    def texture_path(self, texture_id) -> str:
        """
        The path of the png of a texture, such as 'block/stone'.
        """
        return self.resolve(ResourceLocation.texture(texture_id))

    def resolve_parent_chain(self, model: Model) -> list:
        """
        Returns `model` followed by each of its ancestors, stopping at a model
        without parent or with a builtin parent.

        raises:
            CyclicInheritanceError if a model appears twice.
            InheritanceTooDeepError if the chain is longer than max_parent_depth.
            AssetNotFoundError if a parent does not exist.
        """
        chain = [model]
        trail = [model.location or model.filepath]
        visited = {self._visit_key(model.filepath)}

        current = model
        while current.parent_location is not None:
            location = current.parent_location
            if location.is_builtin:
                break

            path = self.resolve(location)
            if self._visit_key(path) in visited:
                raise CyclicInheritanceError(trail + [location])

            if len(chain) >= self.max_parent_depth:
                raise InheritanceTooDeepError(trail + [location], self.max_parent_depth)

            logger.debug(f"Resolving parent {location} of {trail[-1]}")
            current = self.load_resource_at_path(path, Model, location=location)

            chain.append(current)
            trail.append(location)
            visited.add(self._visit_key(path))

        return chain

    @staticmethod
    def _visit_key(path: str) -> str:
        if path is None:
            return None
        return os.path.normcase(os.path.abspath(path))

    def namespaces(self) -> list:
        """
        The namespaces with an `assets/<namespace>` directory in this pack.
        """
        assets_directory = os.path.join(self.root, "assets")
        if not os.path.isdir(assets_directory):
            return []
        return sorted(
            name for name in os.listdir(assets_directory)
            if os.path.isdir(os.path.join(assets_directory, name))
        )

    def iter_resources(self, kind: ResourceKind, namespace: str = MINECRAFT_NAMESPACE) -> Iterator[Tuple[ResourceIdentifier, str]]:
        """
        Yields `(identifier, path)` for every asset of a kind in a namespace.
        Files and folders starting with '_' are skipped.
        """
        directory = kind_directory(self.root, namespace, kind)
        for name, path in iter_files(directory, kind.extension):
            yield ResourceIdentifier(f"{namespace}:{name}"), path

    def blockstates(self, namespace: str = MINECRAFT_NAMESPACE) -> Iterator[Tuple[ResourceIdentifier, str]]:
        return self.iter_resources(BLOCKSTATES, namespace)

    def block_models(self, namespace: str = MINECRAFT_NAMESPACE) -> Iterator[Tuple[ResourceIdentifier, str]]:
        return self.iter_resources(BLOCK_MODEL, namespace)

    def item_models(self, namespace: str = MINECRAFT_NAMESPACE) -> Iterator[Tuple[ResourceIdentifier, str]]:
        return self.iter_resources(ITEM_MODEL, namespace)

    def textures(self, namespace: str = MINECRAFT_NAMESPACE) -> Iterator[Tuple[ResourceIdentifier, str]]:
        return self.iter_resources(TEXTURE, namespace)
