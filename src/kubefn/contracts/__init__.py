from .quantity import Quantity, QuantityFormat
from .function import (
    EnvVar,
    ResourceRequirements,
    Container,
    PodSpec,
    PodTemplateSpec,
    FunctionSpec,
    ObjectMeta,
    Function,
    FunctionList,
)

__all__ = [
    "Quantity",
    "QuantityFormat",
    "EnvVar",
    "ResourceRequirements",
    "Container",
    "PodSpec",
    "PodTemplateSpec",
    "FunctionSpec",
    "ObjectMeta",
    "Function",
    "FunctionList",
]
