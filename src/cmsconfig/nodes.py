"""Typed nodes of the CMS admin configuration document.

Every field kind is its own model tagged by ``widget``; together they form the
``Field`` union. Declared attributes document the keys each kind understands
and their defaults. Any other widget option passes through as an extra key.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator

from .consts import (
    CODE_DEFAULT_LANGUAGE,
    DATE_FORMAT,
    DATETIME_FORMAT,
    FOLDER_EXTENSION,
    FOLDER_IDENTIFIER_FIELD,
    I18N_DUPLICATE,
    TIME_FORMAT,
    WIDGET_BOOLEAN,
    WIDGET_CODE,
    WIDGET_DATETIME,
    WIDGET_FILE,
    WIDGET_IMAGE,
    WIDGET_LIST,
    WIDGET_MARKDOWN,
    WIDGET_NUMBER,
    WIDGET_OBJECT,
    WIDGET_STRING,
    WIDGET_TEXT,
)

I18n = Union[bool, str]


class Node(BaseModel):
    """Base of every schema node."""

    model_config = ConfigDict(extra="allow")

    label: str

    @classmethod
    def build(cls, values: dict[str, Any]):
        """Create a node from already merged values, without validation.

        Only the keys present in ``values`` end up in ``to_dict()``.
        """
        return cls.model_construct(_fields_set=set(values), **values)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, warnings=False)


class WidgetField(Node):
    widget: str
    name: str
    i18n: I18n = True


class LeafField(WidgetField):
    required: bool = False


class StringField(LeafField):
    widget: Literal["string"] = WIDGET_STRING


class TextField(LeafField):
    widget: Literal["text"] = WIDGET_TEXT


class MarkdownField(LeafField):
    widget: Literal["markdown"] = WIDGET_MARKDOWN


class BooleanField(LeafField):
    widget: Literal["boolean"] = WIDGET_BOOLEAN
    i18n: I18n = I18N_DUPLICATE
    default: bool = False


class NumberField(LeafField):
    widget: Literal["number"] = WIDGET_NUMBER
    i18n: I18n = I18N_DUPLICATE
    default: float = 0.0
    value_type: str = "float"


class DatetimeField(LeafField):
    """Stored as an ISO 8601 string unless ``format`` says otherwise."""

    widget: Literal["datetime"] = WIDGET_DATETIME
    i18n: I18n = I18N_DUPLICATE
    date_format: str = DATE_FORMAT
    time_format: str = TIME_FORMAT
    format: str = DATETIME_FORMAT


class FileField(LeafField):
    widget: Literal["file"] = WIDGET_FILE
    i18n: I18n = I18N_DUPLICATE


class ImageField(LeafField):
    widget: Literal["image"] = WIDGET_IMAGE
    i18n: I18n = I18N_DUPLICATE


class CodeField(WidgetField):
    widget: Literal["code"] = WIDGET_CODE
    i18n: I18n = I18N_DUPLICATE
    default_language: str = CODE_DEFAULT_LANGUAGE
    allow_language_selection: bool = False


class ObjectField(WidgetField):
    widget: Literal["object"] = WIDGET_OBJECT
    summary: Optional[str] = None
    fields: list[Field] = []


class ListField(WidgetField):
    """A repeatable field.

    Holds either a single ``field`` (items are bare values) or several
    ``fields`` (items are objects), never both.
    """

    widget: Literal["list"] = WIDGET_LIST
    summary: Optional[str] = None
    field: Optional[Field] = None
    fields: Optional[list[Field]] = None


Field = Annotated[
    Union[
        StringField,
        TextField,
        MarkdownField,
        BooleanField,
        NumberField,
        DatetimeField,
        FileField,
        ImageField,
        CodeField,
        ObjectField,
        ListField,
    ],
    Discriminator("widget"),
]


class FileCollectionEntry(Node):
    name: str
    i18n: I18n = True
    file: str
    fields: list[Field] = []


class FileCollection(Node):
    name: str
    files: list[FileCollectionEntry] = []


class FolderCollection(Node):
    name: str
    folder: str
    extension: str = FOLDER_EXTENSION
    create: bool = True
    identifier_field: str = FOLDER_IDENTIFIER_FIELD
    fields: list[Field] = []


Collection = Union[FileCollection, FolderCollection]

ObjectField.model_rebuild()
ListField.model_rebuild()
FileCollectionEntry.model_rebuild()
FolderCollection.model_rebuild()
FileCollection.model_rebuild()
