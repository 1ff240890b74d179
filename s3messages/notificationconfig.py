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

"""Bucket notification configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Type, TypeVar, Union, cast
from xml.etree import ElementTree as ET

from .enums import EventType
from .xml import Element, SubElement, findall, findtext

_MAX_FILTER_RULE_VALUE_LENGTH = 1024

EventT = Union[EventType, str]


@dataclass(frozen=True)
class FilterRule:
    """S3 key filter rule."""
    PREFIX = "prefix"
    SUFFIX = "suffix"
    name: str
    value: str

    def __post_init__(self):
        if self.name not in [FilterRule.PREFIX, FilterRule.SUFFIX]:
            raise ValueError(
                f"filter rule name must be {FilterRule.PREFIX} or "
                f"{FilterRule.SUFFIX}",
            )
        if self.value is None:
            raise ValueError("filter rule value must be provided")
        if len(self.value) > _MAX_FILTER_RULE_VALUE_LENGTH:
            raise ValueError(
                f"filter rule value must not exceed "
                f"{_MAX_FILTER_RULE_VALUE_LENGTH} characters",
            )

    @classmethod
    def fromxml(cls: Type[FilterRule], element: ET.Element) -> FilterRule:
        """Create new object with values from XML element."""
        return cls(
            name=cast(str, findtext(element, "Name", True)).lower(),
            value=cast(str, findtext(element, "Value", True)),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Name", self.name)
        SubElement(element, "Value", self.value)
        return element


def PrefixFilterRule(value: str) -> FilterRule:  # pylint: disable=invalid-name
    """Create prefix filter rule."""
    return FilterRule(FilterRule.PREFIX, value)


def SuffixFilterRule(value: str) -> FilterRule:  # pylint: disable=invalid-name
    """Create suffix filter rule."""
    return FilterRule(FilterRule.SUFFIX, value)


def _to_event(value: EventT) -> EventT:
    """Convert known event string to EventType; keep others as is."""
    if isinstance(value, EventType):
        return value
    if not value:
        raise ValueError("event must be non-empty string")
    try:
        return EventType.fromstring(value)
    except ValueError:
        return value


CommonConfigT = TypeVar("CommonConfigT", bound="CommonConfig")


@dataclass(frozen=True)
class CommonConfig:
    """Common for cloud-function/queue/topic configuration."""
    events: list[EventT]
    config_id: Optional[str] = None
    prefix_filter_rule: Optional[FilterRule] = None
    suffix_filter_rule: Optional[FilterRule] = None

    def __post_init__(self):
        if not self.events:
            raise ValueError("events must be provided")
        object.__setattr__(
            self, "events", [_to_event(event) for event in self.events],
        )
        if (
                self.prefix_filter_rule is not None and
                self.prefix_filter_rule.name != FilterRule.PREFIX
        ):
            raise ValueError("prefix filter rule must be named prefix")
        if (
                self.suffix_filter_rule is not None and
                self.suffix_filter_rule.name != FilterRule.SUFFIX
        ):
            raise ValueError("suffix filter rule must be named suffix")

    @property
    def filter_rules(self) -> list[FilterRule]:
        """Get filter rules."""
        return [
            rule for rule in (self.prefix_filter_rule, self.suffix_filter_rule)
            if rule is not None
        ]

    def with_filter_rule(
            self: CommonConfigT,
            rule: FilterRule,
    ) -> CommonConfigT:
        """Copy of this configuration having rule replaced by name."""
        if rule.name == FilterRule.PREFIX:
            return replace(self, prefix_filter_rule=rule)
        return replace(self, suffix_filter_rule=rule)

    @staticmethod
    def parsexml(
            element: ET.Element,
    ) -> tuple[
        list[EventT],
        Optional[str],
        Optional[FilterRule],
        Optional[FilterRule],
    ]:
        """Parse events, ID and filter rules."""
        events: list[EventT] = []
        for tag in findall(element, "Event"):
            if not tag.text:
                raise ValueError("missing value in XML tag 'Event'")
            events.append(tag.text)
        rules: dict[str, FilterRule] = {}
        for tag in findall(element, "Filter/S3Key/FilterRule"):
            rule = FilterRule.fromxml(tag)
            rules[rule.name] = rule
        return (
            events,
            findtext(element, "Id"),
            rules.get(FilterRule.PREFIX),
            rules.get(FilterRule.SUFFIX),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        for event in self.events:
            SubElement(element, "Event", str(event))
        if self.config_id is not None:
            SubElement(element, "Id", self.config_id)
        rules = self.filter_rules
        if rules:
            tag = SubElement(SubElement(element, "Filter"), "S3Key")
            for rule in rules:
                rule.toxml(SubElement(tag, "FilterRule"))
        return element


@dataclass(frozen=True)
class CloudFuncConfig(CommonConfig):
    """Cloud function configuration."""
    cloud_func: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.cloud_func:
            raise ValueError("cloud function must be provided")

    @classmethod
    def fromxml(
            cls: Type[CloudFuncConfig],
            element: ET.Element,
    ) -> CloudFuncConfig:
        """Create new object with values from XML element."""
        events, config_id, prefix_rule, suffix_rule = cls.parsexml(element)
        return cls(
            events=events,
            config_id=config_id,
            prefix_filter_rule=prefix_rule,
            suffix_filter_rule=suffix_rule,
            cloud_func=findtext(element, "CloudFunction", True),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "CloudFunction", self.cloud_func)
        return super().toxml(element)


@dataclass(frozen=True)
class QueueConfig(CommonConfig):
    """Queue configuration."""
    queue: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.queue:
            raise ValueError("queue must be provided")

    @classmethod
    def fromxml(cls: Type[QueueConfig], element: ET.Element) -> QueueConfig:
        """Create new object with values from XML element."""
        events, config_id, prefix_rule, suffix_rule = cls.parsexml(element)
        return cls(
            events=events,
            config_id=config_id,
            prefix_filter_rule=prefix_rule,
            suffix_filter_rule=suffix_rule,
            queue=findtext(element, "Queue", True),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Queue", self.queue)
        return super().toxml(element)


@dataclass(frozen=True)
class TopicConfig(CommonConfig):
    """Topic configuration."""
    topic: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.topic:
            raise ValueError("topic must be provided")

    @classmethod
    def fromxml(cls: Type[TopicConfig], element: ET.Element) -> TopicConfig:
        """Create new object with values from XML element."""
        events, config_id, prefix_rule, suffix_rule = cls.parsexml(element)
        return cls(
            events=events,
            config_id=config_id,
            prefix_filter_rule=prefix_rule,
            suffix_filter_rule=suffix_rule,
            topic=findtext(element, "Topic", True),
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        if element is None:
            raise ValueError("element must be provided")
        SubElement(element, "Topic", self.topic)
        return super().toxml(element)


@dataclass(frozen=True)
class NotificationConfig:
    """Notification configuration."""
    cloud_func_config_list: list[CloudFuncConfig] = field(default_factory=list)
    queue_config_list: list[QueueConfig] = field(default_factory=list)
    topic_config_list: list[TopicConfig] = field(default_factory=list)

    @classmethod
    def fromxml(
            cls: Type[NotificationConfig],
            element: ET.Element,
    ) -> NotificationConfig:
        """Create new object with values from XML element."""
        return cls(
            cloud_func_config_list=[
                CloudFuncConfig.fromxml(tag)
                for tag in findall(element, "CloudFunctionConfiguration")
            ],
            queue_config_list=[
                QueueConfig.fromxml(tag)
                for tag in findall(element, "QueueConfiguration")
            ],
            topic_config_list=[
                TopicConfig.fromxml(tag)
                for tag in findall(element, "TopicConfiguration")
            ],
        )

    def toxml(self, element: Optional[ET.Element]) -> ET.Element:
        """Convert to XML."""
        element = Element("NotificationConfiguration")
        for cloud_func_config in self.cloud_func_config_list:
            cloud_func_config.toxml(
                SubElement(element, "CloudFunctionConfiguration"),
            )
        for queue_config in self.queue_config_list:
            queue_config.toxml(SubElement(element, "QueueConfiguration"))
        for topic_config in self.topic_config_list:
            topic_config.toxml(SubElement(element, "TopicConfiguration"))
        return element

    @property
    def is_empty(self) -> bool:
        """Check whether no configuration is set."""
        return not (
            self.cloud_func_config_list or
            self.queue_config_list or
            self.topic_config_list
        )
