"""Translation resource loading.

Defines where resource text comes from (asset sources), how it is decoded
(an ordered list of formats, JSON then YAML) and how the decoded document
becomes an immutable translation tree. Every attempt is reported as an
OperationResult; nothing here raises for a missing or malformed resource.
"""

import asyncio
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Set, Tuple, Type

import yaml

from tree_i18n.i18n.errors import DecodeError, ResourceNotFoundError
from tree_i18n.i18n.models import Leaf, Locale, Node, TreeValue
from tree_i18n.logging import get_module_logger
from tree_i18n.operations import OperationResult

logger = get_module_logger()


class AssetSource(ABC):
    """Abstract source of raw resource text."""

    @abstractmethod
    async def read_text(self, name: str) -> str:
        """Return the content of resource `name` (file name with extension).

        Raises:
            ResourceNotFoundError: If the resource does not exist.
            OSError: For any other I/O failure.
        """


class FileSystemAssetSource(AssetSource):
    """Reads resources from a directory on disk.

    Attributes:
        base_path: Directory holding the resource files.
    """

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def _read(self, name: str) -> str:
        path = self.base_path / name
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise ResourceNotFoundError(str(path)) from e

    async def read_text(self, name: str) -> str:
        return await asyncio.to_thread(self._read, name)


class PackageAssetSource(AssetSource):
    """Reads resources bundled inside an installed Python package.

    Attributes:
        package: Importable package name holding the resources.
        base_path: Directory inside the package, "" for the package root.
    """

    def __init__(self, package: str, base_path: str = ""):
        self.package = package
        self.base_path = base_path

    def _read(self, name: str) -> str:
        target = resources.files(self.package)
        for part in Path(self.base_path, name).parts:
            target = target.joinpath(part)
        try:
            return target.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise ResourceNotFoundError(f"{self.package}:{self.base_path}/{name}") from e

    async def read_text(self, name: str) -> str:
        return await asyncio.to_thread(self._read, name)


@dataclass(frozen=True)
class ResourceFormat:
    """A file extension paired with its decoder.

    Attributes:
        name: Format name used in diagnostics.
        extension: File extension without the dot.
        decoder: Callable turning text into a Python object.
        decode_errors: Exception types the decoder raises for bad content.
    """

    name: str
    extension: str
    decoder: Callable[[str], Any]
    decode_errors: Tuple[Type[BaseException], ...]

    def decode(self, text: str) -> Any:
        try:
            return self.decoder(text)
        except self.decode_errors as e:
            raise DecodeError(self.name, str(e)) from e


JSON_FORMAT = ResourceFormat(
    name="json",
    extension="json",
    decoder=json.loads,
    decode_errors=(ValueError, RecursionError),
)

YAML_FORMAT = ResourceFormat(
    name="yaml",
    extension="yaml",
    decoder=yaml.safe_load,
    decode_errors=(yaml.YAMLError, RecursionError),
)

DEFAULT_FORMATS: Tuple[ResourceFormat, ...] = (JSON_FORMAT, YAML_FORMAT)


def build_tree(data: Mapping[Any, Any], path: str = "") -> Node:
    """Convert a decoded document into an immutable translation tree.

    Keys are coerced to str. Strings become leaves and mappings become
    nodes; anything else (numbers, booleans, lists, null) cannot be
    rendered as a translation and is skipped. A mapping reused in
    several places (YAML anchors) is converted at each place.

    Args:
        data: Decoded mapping.
        path: Dotted path of `data` inside the document, for diagnostics.

    Returns:
        Root Node of the converted tree.

    Raises:
        ValueError: If a mapping contains itself (YAML alias cycle).
    """
    return _build_node(data, path, set())


def _build_node(data: Mapping[Any, Any], path: str, active: Set[int]) -> Node:
    # active holds the ids of the mappings on the current path only
    if id(data) in active:
        raise ValueError(f"Cyclic reference at '{path or '<root>'}'")
    active.add(id(data))
    try:
        children = {}
        for raw_key, raw_value in data.items():
            key = str(raw_key)
            key_path = f"{path}.{key}" if path else key
            value: Optional[TreeValue]
            if isinstance(raw_value, str):
                value = Leaf(raw_value)
            elif isinstance(raw_value, Mapping):
                value = _build_node(raw_value, key_path, active)
            else:
                logger.debug(
                    "unsupported_translation_value_skipped",
                    key=key_path,
                    value_type=type(raw_value).__name__,
                )
                continue
            children[key] = value
        return Node(children)
    finally:
        active.discard(id(data))


def compose_base_name(locale: Locale, use_country_code: bool) -> str:
    """Return "<language>" or "<language>_<region>" for a locale.

    Args:
        locale: Locale to compose the name for.
        use_country_code: Append the region when the locale has one.
    """
    if use_country_code and locale.region_code:
        return f"{locale.language_code}_{locale.region_code}"
    return locale.language_code


class ResourceLoader:
    """Loads a translation tree by base name, trying each format in order.

    Attributes:
        asset_source: Where resource text is read from.
        formats: Formats tried in order; the first that decodes wins.
    """

    def __init__(
        self,
        asset_source: AssetSource,
        formats: Sequence[ResourceFormat] = DEFAULT_FORMATS,
    ):
        if not formats:
            raise ValueError("At least one resource format is required")
        self.asset_source = asset_source
        self.formats = tuple(formats)

    async def load_resource(self, base_name: str) -> OperationResult:
        """Load and decode `base_name` in the first format that works.

        Args:
            base_name: Resource name without extension (e.g., "fr_FR").

        Returns:
            Success with a Node as data, or the last failure with the list
            of every failed attempt as data.
        """
        attempts: List[OperationResult] = []
        for resource_format in self.formats:
            result = await self._load_format(base_name, resource_format)
            if result.is_success:
                logger.debug(
                    "resource_loaded",
                    resource=base_name,
                    format=resource_format.name,
                )
                return result
            attempts.append(result)
            logger.debug(
                "format_fallback",
                resource=base_name,
                format=resource_format.name,
                status=result.status.value,
                reason=result.message,
            )

        last = attempts[-1]
        return OperationResult.error(
            last.status,
            f"Unable to load resource '{base_name}' in any format",
            error_code=last.error_code,
            data=attempts,
        )

    async def _load_format(
        self, base_name: str, resource_format: ResourceFormat
    ) -> OperationResult:
        name = f"{base_name}.{resource_format.extension}"
        try:
            text = await self.asset_source.read_text(name)
        except ResourceNotFoundError as e:
            return OperationResult.not_found(str(e), error_code="RESOURCE_NOT_FOUND")
        except (OSError, UnicodeDecodeError) as e:
            return OperationResult.transient_error(
                f"Failed to read {name}: {e}", error_code="RESOURCE_READ_ERROR"
            )

        try:
            document = resource_format.decode(text)
        except DecodeError as e:
            return OperationResult.permanent_error(str(e), error_code="DECODE_FAILURE")

        if not isinstance(document, Mapping):
            return OperationResult.permanent_error(
                f"{name} does not contain a mapping at its root",
                error_code="DECODE_FAILURE",
            )

        try:
            tree = build_tree(document)
        except (ValueError, RecursionError) as e:
            return OperationResult.permanent_error(
                f"{name} cannot be converted to a translation tree: {e}",
                error_code="DECODE_FAILURE",
            )
        return OperationResult.success(data=tree, message=name)
