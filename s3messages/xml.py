# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage, (C)
# [2014] - [2025] MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""XML encoding and decoding of S3 message bodies."""

from __future__ import annotations

import io
from typing import Optional, TypeVar
from xml.etree import ElementTree as ET

from typing_extensions import Protocol

S3_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"


def Element(  # pylint: disable=invalid-name
    tag: str,
    namespace: Optional[str] = S3_NAMESPACE,
) -> ET.Element:
    """Create root ElementTree.Element with tag and optional namespace."""
    return ET.Element(tag, {"xmlns": namespace} if namespace else {})


def SubElement(  # pylint: disable=invalid-name
    parent: ET.Element, tag: str, text: Optional[str] = None,
) -> ET.Element:
    """Create ElementTree.SubElement on parent with tag and text."""
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def _namespace_of(element: ET.Element) -> str:
    """Get namespace of element tag in '{namespace}tag' notation."""
    if not element.tag.startswith("{"):
        return ""
    end = element.tag.find("}")
    return element.tag[1:end] if end > 0 else ""


def _namespaced(element: ET.Element, path: str) -> tuple[str, dict[str, str]]:
    """Qualify every step of path with namespace of element."""
    namespace = _namespace_of(element)
    if not namespace:
        return path, {}
    path = "/".join(f"ns:{step}" for step in path.split("/"))
    return path, {"ns": namespace}


def localname(element: ET.Element) -> str:
    """Get tag of element without namespace."""
    return element.tag.split("}", 1)[1] if "}" in element.tag else element.tag


def findall(element: ET.Element, path: str) -> list[ET.Element]:
    """Namespace aware ElementTree.Element.findall()."""
    path, namespaces = _namespaced(element, path)
    return element.findall(path, namespaces=namespaces)


def find(
        element: ET.Element,
        path: str,
        strict: bool = False,
) -> Optional[ET.Element]:
    """Namespace aware ElementTree.Element.find()."""
    qualified, namespaces = _namespaced(element, path)
    elem = element.find(qualified, namespaces=namespaces)
    if strict and elem is None:
        raise ValueError(f"XML element <{path}> not found")
    return elem


def findtext(
        element: ET.Element,
        path: str,
        strict: bool = False,
        default: Optional[str] = None,
) -> Optional[str]:
    """
    Namespace aware ElementTree.Element.findtext(). If strict is set,
    ValueError is raised when element does not exist.
    """
    elem = find(element, path, strict=strict)
    return default if elem is None else (elem.text or "")


def findint(
        element: ET.Element,
        path: str,
        strict: bool = False,
) -> Optional[int]:
    """Find text of element and convert it to int."""
    text = findtext(element, path, strict)
    return int(text) if text else None


def findbool(element: ET.Element, path: str) -> bool:
    """Find text of element and check whether it is 'true'."""
    return (findtext(element, path) or "").lower() == "true"


def findtexts(element: ET.Element, path: str) -> list[str]:
    """Find texts of all matching elements skipping empty ones."""
    return [elem.text for elem in findall(element, path) if elem.text]


UnmarshalT = TypeVar("UnmarshalT", bound="UnmarshalProtocol")


class UnmarshalProtocol(Protocol):
    """typing stub for class with `fromxml` method"""

    @classmethod
    def fromxml(cls: type[UnmarshalT], element: ET.Element) -> UnmarshalT:
        """
        Create object by values from XML element.
        Implementations must not call find() for their own element.
        """


def unmarshal(cls: type[UnmarshalT], xmlstring: str | bytes) -> UnmarshalT:
    """Unmarshal given XML string to an object of passed class."""
    return cls.fromxml(ET.fromstring(xmlstring))


def getbytes(element: ET.Element) -> bytes:
    """Convert ElementTree.Element to bytes."""
    with io.BytesIO() as data:
        ET.ElementTree(element).write(
            data,
            encoding=None,
            xml_declaration=False,
        )
        return data.getvalue()


class MarshalT(Protocol):
    """typing stub for class with `toxml` method"""

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """
        Convert python object to ElementTree.Element.
        Root objects receive `None` and create their own `Element`; child
        objects fill the passed `Element` and return it.
        """


def marshal(obj: MarshalT) -> bytes:
    """Get XML data as bytes of ElementTree.Element."""
    return getbytes(obj.toxml(None))
