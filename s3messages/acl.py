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

"""Access control policy of buckets and objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Type, Union, cast
from xml.etree import ElementTree as ET

from .commonconfig import Owner
from .enums import CannedAcl, GranteeType, Permission
from .xml import XSI_NAMESPACE, Element, SubElement, find, findall, findtext

AUTHENTICATED_USERS_URL = (
    "http://acs.amazonaws.com/groups/global/AuthenticatedUsers"
)
ALL_USERS_URL = "http://acs.amazonaws.com/groups/global/AllUsers"
_XSI_TYPE = f"{{{XSI_NAMESPACE}}}type"

_GRANT_HEADERS = {
    Permission.READ: "X-Amz-Grant-Read",
    Permission.WRITE: "X-Amz-Grant-Write",
    Permission.READ_ACP: "X-Amz-Grant-Read-Acp",
    Permission.WRITE_ACP: "X-Amz-Grant-Write-Acp",
    Permission.FULL_CONTROL: "X-Amz-Grant-Full-Control",
}


@dataclass(frozen=True)
class Grantee:
    """Grantee of a grant."""
    grantee_type: GranteeType
    display_name: Optional[str] = None
    email_address: Optional[str] = None
    grantee_id: Optional[str] = None
    uri: Optional[str] = None

    def __post_init__(self):
        grantee_type: Union[GranteeType, str] = self.grantee_type
        if not isinstance(grantee_type, GranteeType):
            grantee_type = GranteeType.fromstring(grantee_type)
        object.__setattr__(self, "grantee_type", grantee_type)

    @classmethod
    def fromxml(cls: Type[Grantee], element: ET.Element) -> Grantee:
        """Create new object with values from XML element."""
        return cls(
            grantee_type=cast(
                str,
                element.get(_XSI_TYPE) or findtext(element, "Type", True),
            ),
            display_name=findtext(element, "DisplayName"),
            email_address=findtext(element, "EmailAddress"),
            grantee_id=findtext(element, "ID"),
            uri=findtext(element, "URI"),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        element.set(_XSI_TYPE, str(self.grantee_type))
        if self.display_name is not None:
            SubElement(element, "DisplayName", self.display_name)
        if self.email_address is not None:
            SubElement(element, "EmailAddress", self.email_address)
        if self.grantee_id is not None:
            SubElement(element, "ID", self.grantee_id)
        if self.uri is not None:
            SubElement(element, "URI", self.uri)
        return element


@dataclass(frozen=True)
class Grant:
    """Grant of access control list."""
    grantee: Optional[Grantee] = None
    permission: Optional[Permission] = None

    def __post_init__(self):
        if self.grantee is None and self.permission is None:
            raise ValueError("grantee or permission must be provided")
        if self.permission is not None and not isinstance(
                self.permission, Permission,
        ):
            object.__setattr__(
                self, "permission", Permission.fromstring(self.permission),
            )

    @classmethod
    def fromxml(cls: Type[Grant], element: ET.Element) -> Grant:
        """Create new object with values from XML element."""
        grantee = find(element, "Grantee")
        permission = findtext(element, "Permission")
        return cls(
            grantee=None if grantee is None else Grantee.fromxml(grantee),
            permission=(
                Permission.fromstring(permission) if permission else None
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if self.grantee is not None:
            self.grantee.toxml(SubElement(element, "Grantee"))
        if self.permission is not None:
            SubElement(element, "Permission", str(self.permission))
        return element


@dataclass(frozen=True)
class AccessControlList:
    """Access control list."""
    grants: list[Grant] = field(default_factory=list)

    @classmethod
    def fromxml(
            cls: Type[AccessControlList],
            element: ET.Element,
    ) -> AccessControlList:
        """Create new object with values from XML element."""
        return cls([Grant.fromxml(elem) for elem in findall(element, "Grant")])

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        if not self.grants:
            raise ValueError("grants must be provided")
        for grant in self.grants:
            grant.toxml(SubElement(element, "Grant"))
        return element


@dataclass(frozen=True)
class AccessControlPolicy:
    """Access control policy."""
    owner: Optional[Owner] = None
    access_control_list: Optional[AccessControlList] = None

    @property
    def owner_id(self) -> Optional[str]:
        """Get owner ID."""
        return self.owner.id if self.owner else None

    @property
    def grants(self) -> list[Grant]:
        """Get grants."""
        return (
            self.access_control_list.grants
            if self.access_control_list else []
        )

    @classmethod
    def fromxml(
            cls: Type[AccessControlPolicy],
            element: ET.Element,
    ) -> AccessControlPolicy:
        """Create new object with values from XML element."""
        elem = find(element, "AccessControlList")
        return cls(
            owner=Owner.fromchild(element),
            access_control_list=(
                None if elem is None else AccessControlList.fromxml(elem)
            ),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("AccessControlPolicy")
        if self.owner:
            self.owner.toxml(SubElement(element, "Owner"))
        if self.access_control_list:
            self.access_control_list.toxml(
                SubElement(element, "AccessControlList"),
            )
        return element

    @property
    def canned_acl(self) -> Optional[CannedAcl]:
        """Get canned ACL matching grants; None if grants are custom."""
        grants = [grant for grant in self.grants if grant.grantee]
        if len(grants) == 1:
            grant = grants[0]
            if (
                    grant.permission == Permission.FULL_CONTROL and
                    not cast(Grantee, grant.grantee).uri
            ):
                return CannedAcl.PRIVATE
            return None
        if len(grants) == 2:
            for grant in grants:
                grantee = cast(Grantee, grant.grantee)
                if grant.permission != Permission.READ:
                    continue
                if grantee.uri == AUTHENTICATED_USERS_URL:
                    return CannedAcl.AUTHENTICATED_READ
                if grantee.uri == ALL_USERS_URL:
                    return CannedAcl.PUBLIC_READ
                if (
                        grantee.grantee_id and
                        self.owner_id == grantee.grantee_id
                ):
                    return CannedAcl.BUCKET_OWNER_READ
            return None
        if len(grants) == 3:
            for grant in grants:
                if (
                        grant.permission == Permission.WRITE and
                        cast(Grantee, grant.grantee).uri == ALL_USERS_URL
                ):
                    return CannedAcl.PUBLIC_READ_WRITE
        return None

    @property
    def grant_acl(self) -> dict[str, str]:
        """Get X-Amz-Grant-* headers of grants to canonical users."""
        acls: dict[str, list[str]] = {}
        for grant in self.grants:
            if (
                    not grant.permission or
                    not grant.grantee or
                    not grant.grantee.grantee_id
            ):
                continue
            acls.setdefault(_GRANT_HEADERS[grant.permission], []).append(
                f"id={grant.grantee.grantee_id}",
            )
        return {key: ", ".join(values) for key, values in acls.items()}
