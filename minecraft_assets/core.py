"""
Module which handles core minecraft_assets functions: path resolution, json
loading, the read-only resource base classes and the exception hierarchy.

Nothing in here knows about blockstates or models. The schema classes in
`minecraft_assets.py` are built on top of these pieces.
"""

from __future__ import annotations

import os
import json
import glob
import logging
import functools
import contextlib

from functools import cached_property
from typing import Any, Iterator, Tuple, TypeVar

import dpath
import dpath.options

logger = logging.getLogger(__name__)

NO_ARGUMENT = object()

T = TypeVar('T')


# Exceptions
class MinecraftAssetsException(Exception):
    """
    Base class for minecraft_assets exceptions.
    """

class AssetIOError(MinecraftAssetsException):
    """
    Raised when an asset file exists but cannot be read, for example when the
    path is a directory or permissions are missing.
    """

class AssetNotFoundError(AssetIOError):
    """
    Raised when an asset identifier does not resolve to an existing file.
    """

class ParseError(MinecraftAssetsException):
    """
    Raised when a file is not valid json, or when the json does not match the
    schema of the asset it is loaded as.
    """
    def __init__(self, filepath: str, message: str) -> None:
        super().__init__(f"{filepath}: {message}")
        self.filepath = filepath
        self.message = message

class WrongVariantError(MinecraftAssetsException):
    """
    Raised when asking a blockstate for variants while it is defined as
    multipart, or the other way around.
    """

class CyclicInheritanceError(MinecraftAssetsException):
    """
    Raised when the parents of a model loop back onto a model already seen.
    """
    def __init__(self, chain: list) -> None:
        super().__init__("Cyclic model inheritance: " + " -> ".join(str(link) for link in chain))
        self.chain = chain

class InheritanceTooDeepError(MinecraftAssetsException):
    """
    Raised when a model has more ancestors than the pack allows.
    """
    def __init__(self, chain: list, max_depth: int) -> None:
        super().__init__(f"Model inheritance deeper than {max_depth}: " + " -> ".join(str(link) for link in chain))
        self.chain = chain
        self.max_depth = max_depth

class UnresolvedTextureVariableError(MinecraftAssetsException):
    """
    Raised when a '#variable' texture reference has no definition anywhere in
    the model chain, or when variables reference each other in a loop.
    """
    def __init__(self, variable: str, message: str = None) -> None:
        super().__init__(message or f"Texture variable '#{variable}' is not defined.")
        self.variable = variable


# Path handling
class ResourceKind():
    """
    Class for encapsulating where one kind of asset lives inside a pack.

    :name: Name of the kind, used in repr and log messages
    :directory: Directory of the kind, relative to the namespace folder
    :extension: File extension, including the leading dot
    :category: Top level folder of the kind, 'assets' or 'data'
    """

    def __init__(self, *, name: str, directory: str, extension: str = ".json", category: str = "assets") -> None:
        self.name = name
        self.directory = directory
        self.extension = extension
        self.category = category

    @property
    def is_model(self) -> bool:
        return self.directory.startswith("models/")

    def __repr__(self) -> str:
        return f"ResourceKind: {self.name}"

BLOCKSTATES = ResourceKind(name="BlockStates", directory="blockstates")
BLOCK_MODEL = ResourceKind(name="BlockModel", directory="models/block")
ITEM_MODEL = ResourceKind(name="ItemModel", directory="models/item")
TEXTURE = ResourceKind(name="Texture", directory="textures", extension=".png")
TEXTURE_META = ResourceKind(name="TextureMeta", directory="textures", extension=".png.mcmeta")

RESOURCE_KINDS = (BLOCKSTATES, BLOCK_MODEL, ITEM_MODEL, TEXTURE, TEXTURE_META)


def resolve(root: str, namespace: str, kind: ResourceKind, name: str) -> str:
    """
    Computes the path of an asset inside a pack:
    `<root>/<category>/<namespace>/<directory>/<name><extension>`

    Names and directories use '/' as separator and are split into segments,
    so the result uses the separator of the current platform. The
    filesystem is not touched.
    """
    segments = [kind.category, namespace]
    segments.extend(kind.directory.split("/"))
    segments.extend(segment for segment in name.split("/") if segment)
    segments[-1] = segments[-1] + kind.extension
    return os.path.join(root, *segments)


def kind_directory(root: str, namespace: str, kind: ResourceKind) -> str:
    """
    Returns the directory holding every asset of a kind, for one namespace.
    """
    return os.path.join(root, kind.category, namespace, *kind.directory.split("/"))


def iter_files(directory: str, extension: str) -> Iterator[Tuple[str, str]]:
    """
    Yields `(name, path)` for every file below `directory` ending with
    `extension`, sorted by path. The name is relative to `directory`, uses '/'
    separators and has the extension removed.

    Files and folders starting with '_' are skipped. A missing directory
    yields nothing.
    """
    pattern = os.path.join(glob.escape(directory), "**", "*" + extension)
    for path in sorted(glob.glob(pattern, recursive=True)):
        if not os.path.isfile(path):
            continue

        relative_path = os.path.relpath(path, directory)
        segments = relative_path.split(os.sep)
        if any(segment.startswith("_") for segment in segments):
            continue

        segments[-1] = segments[-1][:-len(extension)]
        yield "/".join(segments), path


def load_json(filepath: str) -> Any:
    """
    Loads json from a file.

    raises:
        AssetNotFoundError if the file does not exist.
        AssetIOError if the file cannot be read.
        ParseError if the contents are not valid json.
    """
    logger.debug(f"Loading {filepath}")
    try:
        with open(filepath, "r", encoding="utf-8-sig") as fh:
            return json.load(fh)
    except FileNotFoundError as exception:
        raise AssetNotFoundError(f"File not found: {filepath}") from exception
    except ValueError as exception:
        # Covers both JSONDecodeError and UnicodeDecodeError
        raise ParseError(filepath, f"Invalid json: {exception}") from exception
    except OSError as exception:
        raise AssetIOError(f"Could not read {filepath}: {exception}") from exception


def check_type(value: Any, types: tuple) -> bool:
    """
    isinstance, except that booleans never pass as numbers.
    """
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


@contextlib.contextmanager
def empty_string_keys():
    """
    Lets dpath walk json holding "" keys, such as the variant name of
    single-variant blockstates. The previous setting is restored on exit.
    """
    previous = dpath.options.ALLOW_EMPTY_STRING_KEYS
    dpath.options.ALLOW_EMPTY_STRING_KEYS = True
    try:
        yield
    finally:
        dpath.options.ALLOW_EMPTY_STRING_KEYS = previous


# Decorators
class TypeInfo:
    """
    Class for encapsulating the arguments that are passed to sub-resource based
    decorators.

    :jsonpath: The jsonpath, from where this resource can be located
    :attribute: Singular name, used for the `get_<attribute>` getter
    :plural: Name of the list property. Defaults to attribute + 's'
    :getter_attribute: Attribute compared by the getter
    :container: list or dict, the json type holding the sub-resources. None
        accepts either
    """

    def __init__(self, *, jsonpath="", attribute="", getter_attribute="id", plural=None, container=None):
        self.jsonpath = jsonpath
        self.attribute = attribute
        self.getter_attribute = getter_attribute
        self.container = container

        if plural is None:
            self.plural = attribute + "s"
        else:
            self.plural = plural

    def __repr__(self) -> str:
        return "TypeInfo: " + str(vars(self))


class FieldInfo:
    """
    A json field declared through ClassProperty, checked when a resource is
    constructed.
    """

    def __init__(self, attribute: str, jsonpath: str, types: tuple = None, required: bool = False):
        self.attribute = attribute
        self.jsonpath = jsonpath
        self.types = types
        self.required = required

    def __repr__(self) -> str:
        return "FieldInfo: " + str(vars(self))


def ClassProperty(attribute: str, jsonpath: str = NO_ARGUMENT, *, types=None, required: bool = False):
    """
    Class Decorator which injects a single read-only 'property'.

    The property returns None when the field is absent, so that an unspecified
    field can be told apart from one explicitly set to 0 or false.

    :param attribute: The attribute where this property can be accessed from
    :param jsonpath: The jsonpath where this attribute can be found in the json data
    :param types: Type, or tuple of types, the value must have when present
    :param required: Whether a missing value is a schema error
    """

    # Allow single-argument class-properties
    if jsonpath is NO_ARGUMENT:
        jsonpath = attribute

    if types is not None and not isinstance(types, tuple):
        types = (types,)

    def inner(cls):
        @property
        def template_property(self):
            return self.get_jsonpath(jsonpath, default=None)

        setattr(cls, attribute, template_property)

        # Copy rather than append, so that sibling classes don't share fields
        cls.fields = cls.fields + (FieldInfo(attribute, jsonpath, types, required),)
        return cls
    return inner


def SubResourceDefinition(cls: T):
    """
    Inserts a cached property listing every sub-resource found at the
    jsonpath of `cls`. Absent data gives None, not an empty list.
    """
    jsonpath = cls.type_info.jsonpath
    container = cls.type_info.container

    def decorator(func) -> cached_property:
        @cached_property
        @functools.wraps(func)
        def wrapper(self) -> list:
            if not self.jsonpath_exists(jsonpath):
                return None

            if container is not None:
                value = self.get_jsonpath(jsonpath)
                if not isinstance(value, container):
                    raise self.schema_error(
                        f"Field '{jsonpath}' should be {type_name(container())}, found {type_name(value)}."
                    )

            return [cls(parent=self, json_path=path, data=data) for path, data in self.get_data_at(jsonpath)]
        return wrapper
    return decorator


def Getter(cls: T):
    """
    Decorator which allows you to get a sub-resource by its getter attribute.
    For example getting a face from an element.
    """
    attribute_plural = cls.type_info.plural
    getter_attribute = cls.type_info.getter_attribute

    def decorator(func) -> T:
        @functools.wraps(func)
        def wrapper(self, compare):
            for child in getattr(self, attribute_plural) or []:
                if getattr(child, getter_attribute) == compare:
                    return child
            return None
        return wrapper
    return decorator


def ImplementsSubResource(*args):
    """
    Class Decorator which interjects functions to deal with subresources.
    """

    def inner(parent_cls):
        for sub_cls in args:
            cls_type_info: TypeInfo = sub_cls.type_info

            attribute = cls_type_info.attribute
            plural = cls_type_info.plural

            @SubResourceDefinition(sub_cls)
            def components(parent_cls): pass
            setattr(parent_cls, plural, components)
            components.__set_name__(parent_cls, plural)

            @Getter(sub_cls)
            def get_x(parent_cls, id: str): pass
            setattr(parent_cls, f"get_{attribute}", get_x)

            parent_cls.sub_resources = parent_cls.sub_resources + (plural,)

        return parent_cls

    return inner


def SingleSubResource(sub_cls):
    """
    Class Decorator which injects a cached property holding the single
    sub-resource found at the jsonpath of `sub_cls`, or None when absent.
    """
    cls_type_info: TypeInfo = sub_cls.type_info
    jsonpath = cls_type_info.jsonpath
    attribute = cls_type_info.attribute

    def inner(parent_cls):
        @cached_property
        def single(self):
            data = self.get_jsonpath(jsonpath, default=None)
            if data is None:
                return None
            return sub_cls(parent=self, json_path=jsonpath, data=data)

        setattr(parent_cls, attribute, single)
        single.__set_name__(parent_cls, attribute)

        parent_cls.sub_resources = parent_cls.sub_resources + (attribute,)
        return parent_cls

    return inner


# Base Classes
class JsonResource():
    """
    Parent class, which is responsible for all resources which contain
    json data. Resources are read-only snapshots of the data they were built
    from.

    Should not be used directly. Use JsonFileResource, or JsonSubResource instead.
    """

    # Filled in by ClassProperty and the sub-resource decorators
    fields: Tuple[FieldInfo, ...] = ()
    sub_resources: Tuple[str, ...] = ()

    def __init__(self, data: Any = None, file: JsonFileResource = None) -> None:
        self._data = data
        self.file = file

        self.validate()

        # Build every sub-resource now, so schema errors surface on load
        for attribute in self.sub_resources:
            getattr(self, attribute)

    @property
    def data(self) -> Any:
        return self._data

    @property
    def source(self) -> str:
        """
        Path of the file this resource was read from, for error messages.
        """
        if self.file is not None and self.file.filepath is not None:
            return self.file.filepath
        return "<memory>"

    @property
    def location_hint(self) -> str:
        return ""

    def schema_error(self, message: str) -> ParseError:
        if self.location_hint:
            message = f"{self.location_hint}: {message}"
        return ParseError(self.source, message)

    def validate(self) -> None:
        """
        Checks the data against the fields declared for this class.

        raises:
            ParseError if the data does not match.
        """
        if not isinstance(self.data, dict):
            raise self.schema_error(f"Expected an object, found {type_name(self.data)}.")

        for field in self.fields:
            value = self.get_jsonpath(field.jsonpath, default=None)
            if value is None:
                if field.required:
                    raise self.schema_error(f"Missing required field '{field.jsonpath}'.")
                continue

            if field.types is not None and not check_type(value, field.types):
                expected = " or ".join(t.__name__ for t in field.types)
                raise self.schema_error(f"Field '{field.jsonpath}' should be {expected}, found {type_name(value)}.")

    def jsonpath_exists(self, json_path: str) -> bool:
        """
        Checks if a jsonpath exists
        """
        try:
            self.get_jsonpath(json_path)
            return True
        except AssetNotFoundError:
            return False

    def get_jsonpath(self, json_path, default=NO_ARGUMENT):
        """
        Gets value at jsonpath location.

        A default value may be provided, for missing keys.

        raises:
            AssetNotFoundError if the path does not exist.
        """
        try:
            with empty_string_keys():
                return dpath.get(self.data, json_path)
        except (KeyError, ValueError, TypeError) as exception:
            if default is not NO_ARGUMENT:
                return default
            raise AssetNotFoundError(
                f"Path {json_path} does not exist."
            ) from exception

    def get_data_at(self, json_path):
        """
        Returns a list of jsonpaths found at this jsonpath location.
        For a list, this will return: json_path + list index
        For a dict, this will return json_path + dict key

        Missing data path will return []

        raises:
            ParseError if the result is not a list or dict.
        """
        result = self.get_jsonpath(json_path, default=[])

        if isinstance(result, dict):
            for key in result.keys():
                yield json_path + f"/{key}", result[key]
        elif isinstance(result, list):
            for i, element in enumerate(result):
                yield json_path + f"/{i}", element
        else:
            raise self.schema_error(f"Field '{json_path}' should be an object or array, found {type_name(result)}.")

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.data == other.data

    __hash__ = None

    def __str__(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False)


class JsonSubResource(JsonResource):
    """
    A sub resource represents a chunk of json data, within a file.
    """
    type_info: TypeInfo

    def __init__(self, parent: JsonResource = None, json_path: str = None, data: Any = None) -> None:
        # The parent is the resource which owns this sub-resource. For example
        # a Face is owned by an Element, which is owned by a Model.
        self.parent = parent

        # The location within the file, where this sub-resource is stored.
        self.json_path = json_path

        super().__init__(data=data, file=parent.file if parent is not None else None)

    @property
    def id(self) -> str:
        """
        The ID of the sub-resource, such as 'north' for a face.
        """
        return self.json_path.rsplit("/", maxsplit=1)[-1]

    @property
    def location_hint(self) -> str:
        """
        The json_path of this sub-resource, prefixed by those of its parents.
        """
        segments = [self.json_path] if self.json_path else []
        if isinstance(self.parent, JsonSubResource) and self.parent.location_hint:
            segments.insert(0, self.parent.location_hint)
        return "/".join(segments)

    def __repr__(self):
        return f"'{self.__class__.__name__}: {self.json_path}'"


class JsonFileResource(JsonResource):
    """
    A file, which contains json data. Every asset in this library is of this
    type.
    """
    def __init__(self, data: Any = None, filepath: str = None, location=None) -> None:
        # Public
        self.filepath = filepath
        self.location = location

        # Data is either set directly, or is read from the filepath for this
        # resource. This allows assets to be created from in-memory json,
        # whilst still having an associated file location.
        if data is None:
            data = load_json(self.filepath)

        super().__init__(data=data, file=self)

    def __repr__(self):
        return f"'{self.__class__.__name__}: {self.filepath}'"
