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
"""Built-in actuator endpoint implementations.

``RequestMappingEndpoint`` needs starlette and lives in
``pyactuate.actuator.endpoints.mappings_endpoint``.
"""

from pyactuate.actuator.endpoints.autoconfig_endpoint import AutoConfigurationReportEndpoint
from pyactuate.actuator.endpoints.base import AbstractEndpoint
from pyactuate.actuator.endpoints.beans_endpoint import BeansEndpoint
from pyactuate.actuator.endpoints.configprops_endpoint import ConfigurationPropertiesReportEndpoint
from pyactuate.actuator.endpoints.dump_endpoint import DumpEndpoint
from pyactuate.actuator.endpoints.env_endpoint import EnvironmentEndpoint
from pyactuate.actuator.endpoints.health_endpoint import HealthEndpoint
from pyactuate.actuator.endpoints.info_endpoint import InfoEndpoint
from pyactuate.actuator.endpoints.metrics_endpoint import MetricsEndpoint
from pyactuate.actuator.endpoints.shutdown_endpoint import ShutdownEndpoint
from pyactuate.actuator.endpoints.trace_endpoint import TraceEndpoint

__all__ = [
    "AbstractEndpoint",
    "AutoConfigurationReportEndpoint",
    "BeansEndpoint",
    "ConfigurationPropertiesReportEndpoint",
    "DumpEndpoint",
    "EnvironmentEndpoint",
    "HealthEndpoint",
    "InfoEndpoint",
    "MetricsEndpoint",
    "ShutdownEndpoint",
    "TraceEndpoint",
]
