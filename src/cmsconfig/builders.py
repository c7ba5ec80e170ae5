"""Declarative builders for CMS collections and fields.

Each builder takes the label shown in the editor, an optional mapping of
widget options (keyword arguments work too) and, for containers, the child
nodes. ``name`` defaults to the slug of the label; every other default comes
from the node type. Caller options always win over defaults, but ``label``,
``widget`` and the children are fixed.

Example::

    folder_collection("Produtos", None, [
        string("Título"),
        number("Preço"),
        list_("Fotos", None, [image("Foto")]),
    ])

Options are not validated: whatever the caller passes ends up in the
document as is.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from .consts import CONTENT_ROOT
from .nodes import (
    BooleanField,
    CodeField,
    DatetimeField,
    Field,
    FileCollection,
    FileCollectionEntry,
    FileField,
    FolderCollection,
    ImageField,
    ListField,
    MarkdownField,
    Node,
    NumberField,
    ObjectField,
    StringField,
    TextField,
)
from .slug import slugify

Options = Optional[Union[Mapping[str, Any], BaseModel]]

_FIXED_KEYS = ("label", "widget", "field", "fields", "files")


def merge_options(options: Options, defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay ``options`` on ``defaults``, top-level keys only.

    ``options`` may be ``None``, a mapping or a pydantic model, in which case
    only the fields it explicitly sets take part.
    """
    if options is None:
        options = {}
    elif isinstance(options, BaseModel):
        options = options.model_dump(exclude_unset=True)
    return {**defaults, **options}


def _caller_options(options: Options, overrides: Mapping[str, Any]) -> dict[str, Any]:
    return merge_options(overrides, merge_options(options, {}))


def _node_defaults(cls: type[Node]) -> dict[str, Any]:
    return {
        key: info.default
        for key, info in cls.model_fields.items()
        if key not in _FIXED_KEYS and not info.is_required() and info.default is not None
    }


def _resolve_name(label: str, caller: Mapping[str, Any]) -> str:
    return caller.get("name") or slugify(label)


def _build(
    cls: type[Node],
    label: str,
    caller: Mapping[str, Any],
    extra_defaults: Optional[Mapping[str, Any]] = None,
    **fixed: Any,
):
    caller = {key: value for key, value in caller.items() if key not in _FIXED_KEYS}
    name = _resolve_name(label, caller)
    defaults = {"name": name, **_node_defaults(cls)}
    if extra_defaults:
        defaults.update(extra_defaults)
    values = merge_options(caller, defaults)
    # must match the name derived paths were built from
    values["name"] = name
    values["label"] = label
    if "widget" in cls.model_fields:
        values["widget"] = cls.model_fields["widget"].default
    values.update(fixed)
    return cls.build(values)


# ==================== Collections ====================


def file_collection(
    label: str,
    options: Options,
    files: Sequence[FileCollectionEntry],
    **overrides: Any,
) -> FileCollection:
    """Create a collection of non-repeatable entries, each with its own fields.

    Args:
        label: Collection name in the editor, e.g. ``Páginas``
        options: Collection options; ``None`` keeps the defaults
        files: The ``FileCollectionEntry`` nodes editable in this collection

    Defaults::

        name: <slug of label>
    """
    caller = _caller_options(options, overrides)
    return _build(FileCollection, label, caller, files=list(files))


def folder_collection(
    label: str,
    options: Options,
    fields: Sequence[Field],
    **overrides: Any,
) -> FolderCollection:
    """Create a collection of repeatable entries sharing the same fields.

    Args:
        label: Collection name in the editor, e.g. ``Produtos``
        options: Collection options; ``None`` keeps the defaults
        fields: Fields of every entry

    Defaults::

        name: <slug of label>
        folder: /content/<name>
        extension: json
        create: true
        identifier_field: titulo  # change it if entries have no titulo field
    """
    caller = _caller_options(options, overrides)
    name = _resolve_name(label, caller)
    return _build(
        FolderCollection,
        label,
        caller,
        {"folder": f"{CONTENT_ROOT}/{name}"},
        fields=list(fields),
    )


def file_collection_entry(
    label: str,
    options: Options,
    fields: Sequence[Field],
    **overrides: Any,
) -> FileCollectionEntry:
    """Create one file of a ``FileCollection``, e.g. a Home or About page.

    Defaults::

        name: <slug of label>
        i18n: true
        file: /content/<name>.json
    """
    caller = _caller_options(options, overrides)
    name = _resolve_name(label, caller)
    return _build(
        FileCollectionEntry,
        label,
        caller,
        {"file": f"{CONTENT_ROOT}/{name}.json"},
        fields=list(fields),
    )


# ==================== Fields ====================


def string(label: str, options: Options = None, **overrides: Any) -> StringField:
    """Single-line text. Defaults: ``required: false``, ``i18n: true``."""
    return _build(StringField, label, _caller_options(options, overrides))


def text(label: str, options: Options = None, **overrides: Any) -> TextField:
    """Multi-line text. Defaults: ``required: false``, ``i18n: true``."""
    return _build(TextField, label, _caller_options(options, overrides))


def markdown(label: str, options: Options = None, **overrides: Any) -> MarkdownField:
    """Rich text saved as markdown. Defaults: ``required: false``, ``i18n: true``."""
    return _build(MarkdownField, label, _caller_options(options, overrides))


def boolean(label: str, options: Options = None, **overrides: Any) -> BooleanField:
    """Checkbox. Defaults: ``required: false``, ``i18n: duplicate``, ``default: false``."""
    return _build(BooleanField, label, _caller_options(options, overrides))


def number(label: str, options: Options = None, **overrides: Any) -> NumberField:
    """Numeric input. Defaults: ``default: 0.0``, ``value_type: float``, ``i18n: duplicate``."""
    return _build(NumberField, label, _caller_options(options, overrides))


def datetime(label: str, options: Options = None, **overrides: Any) -> DatetimeField:
    """Date and time picker.

    Saved as an ISO 8601 string by default, edited as ``DD/MM/YYYY HH:mm``.
    """
    return _build(DatetimeField, label, _caller_options(options, overrides))


def file(label: str, options: Options = None, **overrides: Any) -> FileField:
    """File picker; uploads land in the document's ``media_folder``."""
    return _build(FileField, label, _caller_options(options, overrides))


def image(label: str, options: Options = None, **overrides: Any) -> ImageField:
    """Image picker; uploads land in the document's ``media_folder``."""
    return _build(ImageField, label, _caller_options(options, overrides))


def code(label: str, options: Options = None, **overrides: Any) -> CodeField:
    """Code editor. Defaults: ``default_language: html``, ``allow_language_selection: false``."""
    return _build(CodeField, label, _caller_options(options, overrides))


def object_(
    label: str,
    options: Options,
    fields: Sequence[Field],
    **overrides: Any,
) -> ObjectField:
    """Group of fields edited together, like a component.

    Defaults::

        name: <slug of label>
        i18n: true
        summary: <label>
    """
    return _build(
        ObjectField,
        label,
        _caller_options(options, overrides),
        {"summary": label},
        fields=list(fields),
    )


def list_(
    label: str,
    options: Options,
    fields: Sequence[Field],
    **overrides: Any,
) -> ListField:
    """Repeatable items made of one or more fields.

    With a single child the items are bare values of that field, so it is
    attached as ``field`` instead of ``fields``.
    """
    caller = _caller_options(options, overrides)
    if len(fields) == 1:
        return _build(ListField, label, caller, {"summary": label}, field=fields[0])
    return _build(ListField, label, caller, {"summary": label}, fields=list(fields))


# ==================== Components ====================


def image_alt(label: str, options: Options = None, **overrides: Any) -> ObjectField:
    """Image with its alternative text, stored as ``{url, alt}``."""
    caller = merge_options(_caller_options(options, overrides), {"summary": "{{alt}}"})
    return object_(
        label,
        caller,
        [
            image("Imagem", name="url"),
            string("Texto alternativo", name="alt"),
        ],
    )
