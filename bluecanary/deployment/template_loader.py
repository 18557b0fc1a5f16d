"""Template loader for color-sliced Deployment manifests."""

import copy
from typing import Any, Dict

from bluecanary.deployment.constants import DeploymentConstants
from bluecanary.deployment.spec import DeploymentSpec
from bluecanary.logger import init_logger

logger = init_logger(__name__)


class DeploymentTemplateLoader:
    """Loader for Deployment templates defined in KubeConfig.templates."""

    def __init__(self, templates: Dict[str, Dict[str, Any]], default_namespace: str = "default"):
        """Initialize template loader.

        Args:
            templates: Dictionary of template configurations from KubeConfig
            default_namespace: Namespace every rendered Deployment is placed in
        """
        self._templates: Dict[str, Dict[str, Any]] = templates
        self._default_namespace = default_namespace

        if not self._templates:
            raise ValueError("No templates provided. At least one template must be defined in KubeConfig.templates.")

        logger.info(f"Loaded {len(self._templates)} Deployment templates from config")
        logger.debug(f"Available templates: {', '.join(self._templates.keys())}")

    def get_template(self, template_name: str) -> Dict[str, Any]:
        """Get a deep copy of a template by name.

        Raises:
            ValueError: If template not found
        """
        if template_name not in self._templates:
            available = ", ".join(self._templates.keys())
            raise ValueError(f"Template '{template_name}' not found. Available: {available}")

        return copy.deepcopy(self._templates[template_name])

    def build_manifest(
        self,
        template_name: str,
        color: str = DeploymentConstants.COLOR_BLUE,
        image: str = None,
        replicas: int = None,
        cpus: str = None,
        memory: str = None,
    ) -> Dict[str, Any]:
        """Build a complete Deployment manifest for one color slice.

        Template structure:
        - image_repository: image name without tag, tagged with the color (REQUIRED unless image is given)
        - replicas: default replica count
        - template: corresponds to spec.template in the Deployment
          - template.metadata -> spec.template.metadata
          - template.spec -> spec.template.spec (Pod spec)

        The name, selector and pod labels are always ``<color>-deploy``.

        Args:
            template_name: Name of the template to use
            color: Color of the slice, e.g. blue or green
            image: Full image reference overriding ``image_repository:color``
            replicas: Replica count overriding the template
            cpus: CPU quantity applied to both requests and limits
            memory: Memory quantity applied to both requests and limits

        Returns:
            Deployment manifest that passes DeploymentSpec.ensure_valid()
        """
        config = self.get_template(template_name)

        if not image:
            repository = config.get("image_repository")
            if not repository:
                raise ValueError(
                    f"Template '{template_name}' is missing required 'image_repository' and no image was given."
                )
            image = f"{repository}:{color}"

        pod_template = config.get("template", {})
        template_metadata = copy.deepcopy(pod_template.get("metadata") or {})
        pod_spec = copy.deepcopy(pod_template.get("spec") or {})
        containers = pod_spec.get("containers") or []
        if not containers:
            raise ValueError(f"Template '{template_name}' does not define any containers.")

        name = DeploymentConstants.deployment_name(color)
        labels = template_metadata.get("labels") or {}
        labels[DeploymentConstants.LABEL_APP] = name
        template_metadata["labels"] = labels

        # Only the first container is the application
        containers[0]["image"] = image
        for container in containers:
            container.setdefault("imagePullPolicy", DeploymentConstants.DEFAULT_IMAGE_PULL_POLICY)

        if cpus is not None or memory is not None:
            resources = containers[0].setdefault("resources", {})
            requests = resources.setdefault("requests", {})
            limits = resources.setdefault("limits", {})
            if cpus is not None:
                requests["cpu"] = str(cpus)
                limits["cpu"] = str(cpus)
            if memory is not None:
                requests["memory"] = memory
                limits["memory"] = memory

        manifest = {
            "apiVersion": DeploymentConstants.API_VERSION,
            "kind": DeploymentConstants.KIND,
            "metadata": {
                "namespace": self._default_namespace,
                "name": name,
            },
            "spec": {
                "replicas": replicas if replicas is not None else config.get("replicas", 1),
                "selector": {"matchLabels": dict(labels)},
                "template": {
                    "metadata": template_metadata,
                    "spec": pod_spec,
                },
            },
        }

        spec = DeploymentSpec.from_manifest(manifest).ensure_valid()
        logger.info(f"Rendered Deployment {spec.name} in {spec.namespace} from template '{template_name}'")
        return manifest

    @property
    def available_templates(self) -> list[str]:
        """Get list of available template names."""
        return list(self._templates.keys())
