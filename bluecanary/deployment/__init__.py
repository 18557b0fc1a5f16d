"""Deployment manifests for blue/green color slices."""

from bluecanary.deployment.constants import DeploymentConstants
from bluecanary.deployment.spec import (
    ContainerSpec,
    DeploymentSpec,
    ResourceList,
    ResourceRequirements,
    dump_manifest,
    load_manifest,
    read_document,
)
from bluecanary.deployment.template_loader import DeploymentTemplateLoader

__all__ = [
    "ContainerSpec",
    "DeploymentConstants",
    "DeploymentSpec",
    "DeploymentTemplateLoader",
    "ResourceList",
    "ResourceRequirements",
    "dump_manifest",
    "load_manifest",
    "read_document",
]
