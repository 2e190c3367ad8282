"""Menu item descriptors shared by :class:`Nav` and :class:`Dropdown`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from .exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)
_BOOL = TypeAdapter(bool)


class ItemDescriptor(BaseModel):
    """Structured configuration for one menu or nav entry.

    Unknown keys are ignored. A value of the wrong type for an optional field is
    replaced by that field's default instead of failing the render.
    """

    label: str
    url: Optional[str] = None
    visible: bool = True
    disabled: bool = False
    active: Optional[bool] = None
    items: Optional[Tuple[Any, ...]] = None
    content: Optional[str] = None
    encode: Optional[bool] = None
    options: Dict[str, Any] = Field(default_factory=dict)
    link_options: Dict[str, Any] = Field(default_factory=dict, alias="linkOptions")
    dropdown_options: Dict[str, Any] = Field(default_factory=dict, alias="dropdownOptions")
    submenu_options: Dict[str, Any] = Field(default_factory=dict, alias="submenuOptions")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("label", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        return value if isinstance(value, str) else str(value)

    @field_validator(
        "url",
        "visible",
        "disabled",
        "active",
        "content",
        "encode",
        "options",
        "link_options",
        "dropdown_options",
        "submenu_options",
        mode="wrap",
    )
    @classmethod
    def _default_on_error(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            _LOGGER.debug("Ignoring invalid %s=%r on menu item", info.field_name, value)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

    @property
    def has_children(self) -> bool:
        """Return ``True`` when the item carries a non-empty submenu."""

        return bool(self.items)

    @property
    def children(self) -> List["Item"]:
        return list(self.items or ())


@dataclass(frozen=True)
class Verbatim:
    """Raw markup rendered as is, e.g. a divider ``<li>``."""

    markup: str


@dataclass(frozen=True)
class Entry:
    """A structured item wrapping an :class:`ItemDescriptor`."""

    descriptor: ItemDescriptor

    @property
    def visible(self) -> bool:
        return self.descriptor.visible


Item = Union[Verbatim, Entry]


def parse_item(raw: Any) -> Optional[Item]:
    """Convert caller data into an :data:`Item`.

    Strings become :class:`Verbatim`; mappings become :class:`Entry`. Values of
    any other type are skipped and ``None`` is returned.

    A mapping whose ``visible`` is false is kept as a hidden entry without
    checking its ``label`` or parsing its submenu.

    Raises
    ------
    ConfigurationError
        When a mapping has no ``label``.
    """

    if isinstance(raw, (Verbatim, Entry)):
        return raw
    if isinstance(raw, str):
        return Verbatim(raw)
    if isinstance(raw, ItemDescriptor):
        return Entry(raw)
    if not isinstance(raw, Mapping):
        _LOGGER.warning("Skipping unsupported menu item of type %s", type(raw).__name__)
        return None

    data = dict(raw)
    children = data.get("items")
    if _is_hidden(raw):
        data.update(label=data.get("label") or "", items=None)
    elif raw.get("label") is None:
        raise ConfigurationError("The 'label' option is required.", item=raw)
    elif isinstance(children, (list, tuple)):
        data["items"] = tuple(parse_items(children))
    else:
        data["items"] = None

    try:
        descriptor = ItemDescriptor.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid menu item: {exc}", item=raw) from exc
    return Entry(descriptor)


def _is_hidden(raw: Mapping[str, Any]) -> bool:
    try:
        return not _BOOL.validate_python(raw.get("visible", True))
    except ValidationError:
        return False


def parse_items(raw_items: Optional[Iterable[Any]]) -> List[Item]:
    """Parse every entry of ``raw_items``, keeping the input order."""

    parsed: List[Item] = []
    for raw in raw_items or ():
        item = parse_item(raw)
        if item is not None:
            parsed.append(item)
    return parsed


__all__ = [
    "Entry",
    "Item",
    "ItemDescriptor",
    "Verbatim",
    "parse_item",
    "parse_items",
]
