# SPDX-FileCopyrightText: 2020-present Dan Pascu <dan@aethereal.link>
#
# SPDX-License-Identifier: AGPL-3.0-or-later

import os
from typing import Self

from lxml import etree

__all__ = 'ETreeDocument', 'ETreeElement', 'FilePath', 'Namespace', 'PathExpression', 'document_namespace', 'parse', 'serialize', 'subelement'  # noqa: RUF022


# noinspection PyProtectedMember
type ETreeElement = etree._Element  # noqa: SLF001
# noinspection PyProtectedMember
type ETreeDocument = etree._ElementTree  # noqa: SLF001
type FilePath = str | os.PathLike[str]


class Namespace(str):
    __slots__ = 'prefix',  # noqa: COM818

    prefix: str

    def __new__(cls, namespace: str, /, *, prefix: str = 'ns') -> Self:
        self = super().__new__(cls, namespace)
        self.prefix = prefix
        return self

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({super().__repr__()}, prefix={self.prefix!r})'

    def __setattr__(self, name: str, value: object, /) -> None:
        if name in self.__slots__ and hasattr(self, name):
            raise AttributeError(f'{self.__class__.__name__} object attribute {name!r} is read-only')
        return super().__setattr__(name, value)

    def tag(self, name: str) -> str:
        return f'{{{self}}}{name}'


def document_namespace(document: ETreeDocument) -> Namespace | None:
    """Return the namespace of the document's root element or None if it doesn't have one"""
    namespace = etree.QName(document.getroot()).namespace
    return Namespace(namespace) if namespace else None


class PathExpression:
    """
    A compiled XPath expression bound to the namespace of a document.

    The expression is given as a template in which ``{ns}`` stands for the
    namespace prefix of every element name step, for example:

      /*/{ns}filter[{ns}filter-name=$filter_name]

    If a namespace is given, ``{ns}`` expands to its prefix followed by a
    colon and the prefix is bound to the namespace, otherwise it expands to
    the empty string and the element names are matched without a namespace.
    XPath variables ($name) are provided as keyword arguments when evaluating
    the expression, which avoids quoting issues with arbitrary values.
    """

    __slots__ = '_xpath', 'expression', 'namespace'

    def __init__(self, template: str, /, *, namespace: Namespace | None = None) -> None:
        if namespace is None:
            self.expression = template.format(ns='')
            self._xpath = etree.XPath(self.expression)
        else:
            self.expression = template.format(ns=f'{namespace.prefix}:')
            self._xpath = etree.XPath(self.expression, namespaces={namespace.prefix: namespace})
        self.namespace = namespace

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.expression!r}, namespace={self.namespace!r})'

    def all(self, context: ETreeElement | ETreeDocument, /, **variables: str) -> list[ETreeElement]:
        """Return the elements selected by the expression"""
        result = self._xpath(context, **variables)
        if not isinstance(result, list):
            raise TypeError(f'The {self.expression!r} expression does not select a node set')
        return [node for node in result if isinstance(node, etree._Element)]  # noqa: SLF001

    def first(self, context: ETreeElement | ETreeDocument, /, **variables: str) -> ETreeElement | None:
        """Return the first element selected by the expression or None if nothing matched"""
        elements = self.all(context, **variables)
        return elements[0] if elements else None

    def text(self, context: ETreeElement | ETreeDocument, /, **variables: str) -> str:
        """Return the string value of the expression"""
        result = self._xpath(context, **variables)
        if isinstance(result, list):
            if not result:
                return ''
            node = result[0]
            return ''.join(node.itertext()) if isinstance(node, etree._Element) else str(node)  # noqa: SLF001
        if isinstance(result, bool):
            return 'true' if result else 'false'
        return str(result)


def subelement(parent: ETreeElement, name: str, /, *, namespace: Namespace | None = None, text: str | None = None) -> ETreeElement:
    """Create an element with the given name and append it as the last child of parent"""
    element = etree.SubElement(parent, namespace.tag(name) if namespace is not None else name)
    if text is not None:
        element.text = text
    return element


def parse(path: FilePath) -> ETreeDocument:
    # blank text is dropped so that the elements added later get indented along with the rest when written back
    parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False, no_network=True)
    return etree.parse(os.fspath(path), parser)


def serialize(document: ETreeDocument, path: FilePath) -> None:
    document.write(os.fspath(path), encoding=document.docinfo.encoding or 'UTF-8', xml_declaration=True, pretty_print=True)
