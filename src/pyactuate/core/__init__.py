# Copyright 2026 Firefly Software Solutions Inc.
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
"""Core — configuration, resources, properties loading and binding."""

from pyactuate.core.binder import PropertiesBinder
from pyactuate.core.config import Config, config_properties
from pyactuate.core.properties import load_properties, parse_properties
from pyactuate.core.resources import ClasspathResource, FileSystemResource, Resource, resolve_resource

__all__ = [
    "ClasspathResource",
    "Config",
    "FileSystemResource",
    "PropertiesBinder",
    "Resource",
    "config_properties",
    "load_properties",
    "parse_properties",
    "resolve_resource",
]
