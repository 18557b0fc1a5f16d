"""Typed view over a Kubernetes ``apps/v1`` Deployment manifest.

Only the fields a color slice needs are modelled: identity, replica count,
selector/template labels and the container list with ports and resources.
Everything else (rollout strategy, probes, surge limits) is not
represented here and is left untouched in the source document.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bluecanary.common.exceptions import InvalidManifestError
from bluecanary.deployment.constants import DeploymentConstants
from bluecanary.utils.quantity import parse_cpu, parse_memory


class ResourceList(BaseModel):
    model_config = ConfigDict(frozen=True)

    cpu: str | None = None
    memory: str | None = None

    @field_validator("cpu", "memory", mode="before")
    @classmethod
    def stringify_quantity(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    def to_manifest(self) -> dict[str, str]:
        # memory first, matching the layout of the hand-written manifests
        result = {}
        if self.memory is not None:
            result["memory"] = self.memory
        if self.cpu is not None:
            result["cpu"] = self.cpu
        return result


class ResourceRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    requests: ResourceList = Field(default_factory=ResourceList)
    limits: ResourceList = Field(default_factory=ResourceList)

    def is_empty(self) -> bool:
        return not self.requests.to_manifest() and not self.limits.to_manifest()


class ContainerSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    image: str
    image_pull_policy: str = DeploymentConstants.DEFAULT_IMAGE_PULL_POLICY
    ports: list[int] = Field(default_factory=list)
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)

    @classmethod
    def from_manifest(cls, container: dict[str, Any]) -> "ContainerSpec":
        resources = container.get("resources") or {}
        return cls(
            name=container.get("name"),
            image=container.get("image"),
            image_pull_policy=container.get("imagePullPolicy", DeploymentConstants.DEFAULT_IMAGE_PULL_POLICY),
            ports=[port["containerPort"] for port in container.get("ports") or []],
            resources=ResourceRequirements(
                requests=ResourceList(**(resources.get("requests") or {})),
                limits=ResourceList(**(resources.get("limits") or {})),
            ),
        )

    def to_manifest(self) -> dict[str, Any]:
        container: dict[str, Any] = {
            "name": self.name,
            "image": self.image,
            "imagePullPolicy": self.image_pull_policy,
        }
        if self.ports:
            container["ports"] = [{"containerPort": port} for port in self.ports]
        if not self.resources.is_empty():
            resources = {}
            if requests := self.resources.requests.to_manifest():
                resources["requests"] = requests
            if limits := self.resources.limits.to_manifest():
                resources["limits"] = limits
            container["resources"] = resources
        return container

    def with_tag(self, tag: str) -> "ContainerSpec":
        return self.model_copy(update={"image": retag_image(self.image, tag)})

    def problems(self) -> list[str]:
        problems = []
        requests, limits = self.resources.requests, self.resources.limits
        for resource, parse in (("cpu", parse_cpu), ("memory", parse_memory)):
            request, limit = getattr(requests, resource), getattr(limits, resource)
            if request is None or limit is None:
                continue
            try:
                if parse(request) > parse(limit):
                    problems.append(f"container {self.name}: {resource} request {request} exceeds limit {limit}")
            except ValueError as e:
                problems.append(f"container {self.name}: {e}")
        return problems


class DeploymentSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = "default"
    replicas: int = 1
    selector_labels: dict[str, str] = Field(default_factory=dict)
    template_labels: dict[str, str] = Field(default_factory=dict)
    containers: list[ContainerSpec] = Field(default_factory=list)

    @classmethod
    def from_manifest(cls, manifest: dict[str, Any]) -> "DeploymentSpec":
        if not isinstance(manifest, dict):
            raise InvalidManifestError(f"manifest must be a mapping, got {type(manifest).__name__}")
        if manifest.get("apiVersion") != DeploymentConstants.API_VERSION:
            raise InvalidManifestError(
                f"unsupported apiVersion {manifest.get('apiVersion')!r}, expected {DeploymentConstants.API_VERSION}"
            )
        if manifest.get("kind") != DeploymentConstants.KIND:
            raise InvalidManifestError(f"unsupported kind {manifest.get('kind')!r}, expected {DeploymentConstants.KIND}")

        try:
            metadata = manifest.get("metadata") or {}
            spec = manifest.get("spec") or {}
            template = spec.get("template") or {}
            return cls(
                name=metadata.get("name"),
                namespace=metadata.get("namespace", "default"),
                replicas=spec.get("replicas", 1),
                selector_labels=(spec.get("selector") or {}).get("matchLabels") or {},
                template_labels=(template.get("metadata") or {}).get("labels") or {},
                containers=[
                    ContainerSpec.from_manifest(container)
                    for container in (template.get("spec") or {}).get("containers") or []
                ],
            )
        except (ValidationError, KeyError, TypeError, AttributeError) as e:
            raise InvalidManifestError(f"malformed Deployment manifest: {e}") from e

    def to_manifest(self) -> dict[str, Any]:
        return {
            "apiVersion": DeploymentConstants.API_VERSION,
            "kind": DeploymentConstants.KIND,
            "metadata": {
                "namespace": self.namespace,
                "name": self.name,
            },
            "spec": {
                "replicas": self.replicas,
                "selector": {"matchLabels": dict(self.selector_labels)},
                "template": {
                    "metadata": {"labels": dict(self.template_labels)},
                    "spec": {"containers": [container.to_manifest() for container in self.containers]},
                },
            },
        }

    @property
    def color(self) -> str | None:
        if self.name.endswith(DeploymentConstants.NAME_SUFFIX):
            return self.name[: -len(DeploymentConstants.NAME_SUFFIX)] or None
        return None

    def with_color(self, color: str) -> "DeploymentSpec":
        """Return the same slice re-targeted at another color.

        The deployment name and ``app`` labels become ``<color>-deploy`` and every
        container image is re-tagged ``:<color>``.
        """
        if not color:
            raise ValueError("color must be a non-empty string")
        name = DeploymentConstants.deployment_name(color)
        return DeploymentSpec(
            name=name,
            namespace=self.namespace,
            replicas=self.replicas,
            selector_labels={**self.selector_labels, DeploymentConstants.LABEL_APP: name},
            template_labels={**self.template_labels, DeploymentConstants.LABEL_APP: name},
            containers=[container.with_tag(color) for container in self.containers],
        )

    def problems(self) -> list[str]:
        problems = []
        if self.replicas < 0:
            problems.append(f"replicas must be >= 0, got {self.replicas}")
        if not self.containers:
            problems.append("at least one container is required")
        if self.selector_labels != self.template_labels:
            problems.append(
                f"selector labels {self.selector_labels} do not match template labels {self.template_labels}"
            )
        for container in self.containers:
            problems.extend(container.problems())
        return problems

    def ensure_valid(self) -> "DeploymentSpec":
        if problems := self.problems():
            raise InvalidManifestError(f"invalid Deployment {self.name}: " + "; ".join(problems))
        return self


def retag_image(image: str, tag: str) -> str:
    """Replace the tag of an image reference, dropping any digest."""
    repository = image.split("@", 1)[0]
    name, sep, current_tag = repository.rpartition(":")
    if sep and "/" not in current_tag:
        repository = name
    return f"{repository}:{tag}"


def read_document(path: str | Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_manifest(path: str | Path) -> DeploymentSpec:
    return DeploymentSpec.from_manifest(read_document(path))


def dump_manifest(spec: DeploymentSpec, path: str | Path | None = None) -> str:
    text = yaml.safe_dump(spec.to_manifest(), sort_keys=False)
    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
    return text
