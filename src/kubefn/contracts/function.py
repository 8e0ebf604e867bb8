"""Pydantic models for function resources as served by the cluster API."""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from .quantity import Quantity

MEMORY = "memory"


class _Resource(BaseModel):
    """Shared config: accept wire (camelCase) and python field names, keep undeclared API fields."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class EnvVar(_Resource):
    """Environment variable set on a container."""
    name: str = Field(..., description="Variable name (not required to be unique)")
    value: Optional[str] = Field(default=None, description="Literal value")


class ResourceRequirements(_Resource):
    """Compute resource limits and requests of a container."""
    limits: Dict[str, Quantity] = Field(default_factory=dict, description="Maximum resources by kind")
    requests: Dict[str, Quantity] = Field(default_factory=dict, description="Requested resources by kind")

    @field_validator("limits", "requests", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return {} if value is None else value

    def memory(self) -> Optional[Quantity]:
        """Memory limit, falling back to the memory request."""
        if MEMORY in self.limits:
            return self.limits[MEMORY]
        return self.requests.get(MEMORY)


class Container(_Resource):
    """Container of the function's pod template."""
    name: Optional[str] = Field(default=None, description="Container name")
    image: Optional[str] = Field(default=None, description="Container image")
    env: List[EnvVar] = Field(default_factory=list, description="Environment in declaration order")
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)

    @field_validator("env", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class PodSpec(_Resource):
    containers: List[Container] = Field(default_factory=list)

    @field_validator("containers", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class PodTemplateSpec(_Resource):
    spec: PodSpec = Field(default_factory=PodSpec)


class FunctionSpec(_Resource):
    """Deployment description of a function."""
    handler: Optional[str] = Field(default=None, description="Handler reference, e.g. module.entrypoint")
    function: Optional[str] = Field(default=None, description="Function source")
    runtime: Optional[str] = Field(default=None, description="Runtime identifier, e.g. python2.7")
    type: Optional[str] = Field(default=None, description="Trigger type (HTTP, PubSub, ...)")
    topic: Optional[str] = Field(default=None, description="Topic for event-triggered functions")
    deps: Optional[str] = Field(default=None, description="Dependency descriptor contents")
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec, description="Pod template")


class ObjectMeta(_Resource):
    """Identity of a resource: name is unique within its namespace."""
    name: str = Field(..., description="Resource name")
    namespace: Optional[str] = Field(default=None, description="Namespace the resource lives in")
    labels: Dict[str, str] = Field(default_factory=dict, description="Resource labels")
    uid: Optional[str] = Field(default=None)
    resource_version: Optional[str] = Field(default=None, alias="resourceVersion")
    creation_timestamp: Optional[str] = Field(default=None, alias="creationTimestamp")

    @field_validator("labels", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return {} if value is None else value


class Function(_Resource):
    """A deployed function."""
    api_version: Optional[str] = Field(default=None, alias="apiVersion")
    kind: Optional[str] = Field(default=None)
    metadata: ObjectMeta
    spec: FunctionSpec = Field(default_factory=FunctionSpec)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> Optional[str]:
        return self.metadata.namespace

    def first_container(self) -> Optional[Container]:
        """First container of the pod template, if any."""
        containers = self.spec.template.spec.containers
        return containers[0] if containers else None


class FunctionList(_Resource):
    """Ordered collection of functions."""
    api_version: Optional[str] = Field(default=None, alias="apiVersion")
    kind: Optional[str] = Field(default=None)
    items: List[Function] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    def names(self) -> List[str]:
        return [item.name for item in self.items]

    def to_wire(self) -> dict:
        """Dump using API field names, omitting unset optional fields; undeclared fields are written back as received."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
